"""Test helper utilities."""

TIMESTAMP = 1700000000000  # 2023-11-14T22:13:20Z


def make_document(counters, timestamp=TIMESTAMP):
    """Build a metrics document from ``{code: {suffix: value}}``."""
    data = {}
    for code, values in counters.items():
        for suffix, value in values.items():
            data[f"_{code}_{suffix}_count"] = value
    return {"data": data, "timestamp_resource": timestamp}


def delays(delayed, total, code="cm", timestamp=TIMESTAMP):
    return make_document(
        {code: {"delayed_for_more_than_five_minutes": delayed, "total_until_now": total}},
        timestamp,
    )


def validations(today, last_week, code="cm", timestamp=TIMESTAMP):
    return make_document(
        {code: {"today_valid": today, "last_week_valid": last_week}},
        timestamp,
    )


def texts(node):
    """All text contents of a node dict, depth first."""
    if node["type"] == "text":
        return [node["text"]]
    return [t for child in node.get("children", []) for t in texts(child)]
