"""Outline constants."""

LOG_DOMAIN = "outline"

# Callout markers: "> [!chat-r]" / "> [!chat-l]"
DEFAULT_ROLE_TAGS = ("chat-r", "chat-l")
QUOTE_PREFIX = "> "

# Whitespace accepted after an opener and stripped from heading text.
# Excludes the C0 separators \x1c-\x1f and NEL that str.isspace() accepts, includes the BOM.
WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

DEFAULT_MAX_HEADING_LENGTH = 80
DEFAULT_ELLIPSIS = "..."
CALLOUT_HEADING_LEVEL = 1

DEFAULT_EXTENSIONS = (".md",)
