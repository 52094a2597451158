"""CSV and JSON output."""

import csv
import dataclasses
import io
import json
from datetime import datetime

CSV_HEADER = ['TYPE', 'LOGIN', 'NAME']

CATEGORY_LABELS = {
    'pr_creators': 'pr creator',
    'pr_commentators': 'pr commentator',
    'issue_creators': 'issue creator',
    'issue_commentators': 'issue commentator',
    'commit_authors': 'commit author',
    'reactors': 'reactor',
}


def flatten(synopsis):
    """(label, login, name) rows for every contributor of every requested category"""
    return [
        [CATEGORY_LABELS[category], contributor.login, contributor.name or '']
        for category, contributors in synopsis.categories()
        for contributor in contributors
    ]


def to_csv(synopsis):
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(CSV_HEADER)
    writer.writerows(flatten(synopsis))
    return buffer.getvalue()


def _default(obj):
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(result, indent=2):
    """Serialize a synopsis, a from_config result or a raw dry-run response"""
    return json.dumps(result, indent=indent, default=_default)
