# dto_codec/__init__.py

"""DTO Codec Package

Typed records for GitHub issues with a JSON codec that parses and
serializes them, rolling back cleanly on any failure.
"""

# Local imports
# Per-type API
from dto_codec.adapters.api import issue_free
from dto_codec.adapters.api import issue_init
from dto_codec.adapters.api import issue_parse
from dto_codec.adapters.api import issue_serialize
from dto_codec.adapters.api import issue_serialize_pretty
from dto_codec.adapters.api import label_free
from dto_codec.adapters.api import label_init
from dto_codec.adapters.api import label_parse
from dto_codec.adapters.api import label_serialize
from dto_codec.adapters.api import label_serialize_pretty
from dto_codec.adapters.api import user_free
from dto_codec.adapters.api import user_init
from dto_codec.adapters.api import user_parse
from dto_codec.adapters.api import user_serialize
from dto_codec.adapters.api import user_serialize_pretty

# Generic entry points
from dto_codec.application.codec import parse
from dto_codec.application.codec import serialize
from dto_codec.application.codec import serialize_pretty

# Records and errors
from dto_codec.core.domain import CodecError
from dto_codec.core.domain import ErrorKind
from dto_codec.core.domain import Issue
from dto_codec.core.domain import Label
from dto_codec.core.domain import Record
from dto_codec.core.domain import User
from dto_codec.core.types import Err
from dto_codec.core.types import Ok
from dto_codec.core.types import Result

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Records
    "Issue",
    "Label",
    "Record",
    "User",
    # Results and errors
    "CodecError",
    "Err",
    "ErrorKind",
    "Ok",
    "Result",
    # Generic entry points
    "parse",
    "serialize",
    "serialize_pretty",
    # Per-type API
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
    # Version
    "__version__",
]
