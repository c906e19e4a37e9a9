# dto_codec/adapters/api/__init__.py

"""Public per-type codec API

Every record type exposes ``<type>_init``, ``<type>_free``,
``<type>_parse``, ``<type>_serialize`` and ``<type>_serialize_pretty``.
"""

# Local imports
from dto_codec.adapters.api._github_issues import issue_free
from dto_codec.adapters.api._github_issues import issue_init
from dto_codec.adapters.api._github_issues import issue_parse
from dto_codec.adapters.api._github_issues import issue_serialize
from dto_codec.adapters.api._github_issues import issue_serialize_pretty
from dto_codec.adapters.api._github_issues import label_free
from dto_codec.adapters.api._github_issues import label_init
from dto_codec.adapters.api._github_issues import label_parse
from dto_codec.adapters.api._github_issues import label_serialize
from dto_codec.adapters.api._github_issues import label_serialize_pretty
from dto_codec.adapters.api._github_issues import user_free
from dto_codec.adapters.api._github_issues import user_init
from dto_codec.adapters.api._github_issues import user_parse
from dto_codec.adapters.api._github_issues import user_serialize
from dto_codec.adapters.api._github_issues import user_serialize_pretty

__all__ = [
    "issue_free",
    "issue_init",
    "issue_parse",
    "issue_serialize",
    "issue_serialize_pretty",
    "label_free",
    "label_init",
    "label_parse",
    "label_serialize",
    "label_serialize_pretty",
    "user_free",
    "user_init",
    "user_parse",
    "user_serialize",
    "user_serialize_pretty",
]
