"""uricomponents._abnf
Character classes and grammar rules shared by every component.
Each of these ABNF rules is from RFC 3986, 3987, 6874, 5234, or 1123.
"""

import re

# ALPHA = %x41-5A / %x61-7A
_ALPHA: str = r"[A-Za-z]"

# DIGIT = %x30-39
_DIGIT: str = r"[0-9]"

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
_HEXDIG: str = rf"(?:{_DIGIT}|[A-Fa-f])"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED: str = rf"(?:{_ALPHA}|{_DIGIT}|[-._~])"

# pct-encoded = "%" HEXDIG HEXDIG
_PCT_ENCODED: str = rf"%{_HEXDIG}{_HEXDIG}"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: str = r"[!$&'()*+,;=]"

# gen-delims = ":" / "/" / "?" / "#" / "[" / "]" / "@"
_GEN_DELIMS: str = r"[:/?#\[\]@]"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME: str = rf"{_ALPHA}(?:{_ALPHA}|{_DIGIT}|[+\-.])*"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
_DEC_OCTET: str = rf"(?:{_DIGIT}|[1-9]{_DIGIT}|1{_DIGIT}{{2}}|2[0-4]{_DIGIT}|25[0-5])"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
_IPV4ADDRESS: str = rf"{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}"

# h16 = 1*4HEXDIG
_H16: str = rf"(?:{_HEXDIG}{{1,4}})"

# ls32 = ( h16 ":" h16 ) / IPv4address
_LS32: str = rf"(?:{_H16}:{_H16}|{_IPV4ADDRESS})"

# IPv6address =                                      6( h16 ":" ) ls32
#                       /                       "::" 5( h16 ":" ) ls32
#                       / [               h16 ] "::" 4( h16 ":" ) ls32
#                       / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#                       / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#                       / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#                       / [ *4( h16 ":" ) h16 ] "::"              ls32
#                       / [ *5( h16 ":" ) h16 ] "::"              h16
#                       / [ *6( h16 ":" ) h16 ] "::"
_IPV6ADDRESS: str = (
    "(?:"
    + r"|".join(
        (
                                           rf"(?:{_H16}:){{6}}{_LS32}",
                                         rf"::(?:{_H16}:){{5}}{_LS32}",
                              rf"(?:{_H16})?::(?:{_H16}:){{4}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,1}}{_H16})?::(?:{_H16}:){{3}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,2}}{_H16})?::(?:{_H16}:){{2}}{_LS32}",
            rf"(?:(?:{_H16}:){{0,3}}{_H16})?::(?:{_H16}:){_LS32}",
            rf"(?:(?:{_H16}:){{0,4}}{_H16})?::{_LS32}",
            rf"(?:(?:{_H16}:){{0,5}}{_H16})?::{_H16}",
            rf"(?:(?:{_H16}:){{0,6}}{_H16})?::",
        )
    )
    + ")"
)

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
_IPVFUTURE: str = rf"v(?P<version>{_HEXDIG}+)\.(?:{_UNRESERVED}|{_SUB_DELIMS}|:)+"

# reg-name = *( unreserved / pct-encoded / sub-delims )
# Hosts are matched once decoded, so pct-encoded never appears here.
_REG_NAME: str = rf"(?:{_UNRESERVED}|{_SUB_DELIMS})*"

# RFC 1123 section 2.1
# label = let-dig [ *61( let-dig / "-" ) let-dig ]
_DOMAIN_LABEL: str = r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"

# domain = label *126( "." label ) [ "." ]
_DOMAIN_NAME: str = rf"{_DOMAIN_LABEL}(?:\.{_DOMAIN_LABEL}){{0,126}}\.?"

SCHEME_PAT: re.Pattern[str] = re.compile(_SCHEME)
IPV4ADDRESS_PAT: re.Pattern[str] = re.compile(_IPV4ADDRESS)
IPV6ADDRESS_PAT: re.Pattern[str] = re.compile(_IPV6ADDRESS)
IPVFUTURE_PAT: re.Pattern[str] = re.compile(_IPVFUTURE)
REG_NAME_PAT: re.Pattern[str] = re.compile(_REG_NAME)
DOMAIN_NAME_PAT: re.Pattern[str] = re.compile(_DOMAIN_NAME, re.IGNORECASE)
GEN_DELIMS_PAT: re.Pattern[str] = re.compile(_GEN_DELIMS)
PCT_ENCODED_RUN_PAT: re.Pattern[str] = re.compile(rf"(?:{_PCT_ENCODED})+")

# C0 controls and DEL never appear in a component, encoded or not.
CONTROL_CHARS_PAT: re.Pattern[str] = re.compile(r"[\x00-\x1f\x7f]")

# Characters that are never valid in a host, whatever its encoding.
INVALID_HOST_CHARS_PAT: re.Pattern[str] = re.compile(r"[:/?#\[\]@ ]")

UNRESERVED_CHARS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
SUB_DELIMS_CHARS: str = "!$&'()*+,;="
GEN_DELIMS_CHARS: str = ":/?#[]@"
