from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from utils.logging import get_logger

logger = get_logger(__name__)


def maybe_load_yaml(path: Optional[str]) -> Dict[str, Any]:
    """Load YAML config file with fallback to empty dict."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring config file {path}: {e}")
        return {}


def write_text(path: str | Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    return p
