__version__ = "0.1"

from .authority import Authority
from .codec import NO_ENCODING, RFC1738, RFC3986, RFC3987, Encoding
from .component import Component
from .data_path import DataPath
from .domain import Domain
from .exceptions import IdnaConversionFailed, IdnaError, OffsetOutOfBounds, PortOutOfRange, UriException, UriSyntaxError
from .fragment import Fragment
from .hierarchical_path import HierarchicalPath
from .host import Host
from .idna_codec import IdnaCodec, IdnaResult
from .path import Path
from .port import Port
from .query import Query
from .scheme import Scheme
from .userinfo import UserInfo
