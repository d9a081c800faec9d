from . import cli
from . import exceptions
from . import fetch
from . import get
from . import models
from . import post
from . import utils
from .exceptions import AocfetchError
from .fetch import verify
from .get import get_brief
from .get import get_data
from .models import Level
from .models import SessionContext
from .post import submit

__all__ = [
    "AocfetchError",
    "Level",
    "SessionContext",
    "cli",
    "exceptions",
    "fetch",
    "get",
    "get_brief",
    "get_data",
    "models",
    "post",
    "submit",
    "utils",
    "verify",
]
