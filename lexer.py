# lexer.py
# Hand-rolled JSON tokenizer for the directory JSON validator
# Author: Bradley Saucier - call sign viper1
#
# Disclaimer:
# This is a personal project submitted for a coding competition.
# It does not represent or reflect the views, policies, or positions
# of the United States Department of Defense or Anduril Industries.
#
# =============================================================================
#  TOKENIZER: SINGLE PASS, CHARACTER DRIVEN
# =============================================================================
#
# The tokenizer walks the input once, left to right, and classifies each run
# of characters into a Token. It never raises: a lexical violation becomes an
# INVALID token and the scan stops right there, since no grammar rule can
# accept the stream once an INVALID token exists [craftinginterpreters.com,
# Scanning].
#
# Only lexical shape is checked. Numbers stay as text and string escapes are
# kept verbatim; nothing is converted into Python values.
# =============================================================================

import re
from typing import List, NamedTuple, Tuple

# ---------------------------------------------------------------------------
# TOKEN KINDS
# ---------------------------------------------------------------------------
LBRACE   = "LBRACE"
RBRACE   = "RBRACE"
LBRACKET = "LBRACKET"
RBRACKET = "RBRACKET"
COLON    = "COLON"
COMMA    = "COMMA"
STRING   = "STRING"
NUMBER   = "NUMBER"
BOOLEAN  = "BOOLEAN"
NULL     = "NULL"
INVALID  = "INVALID"

_STRUCTURAL = {
    "{": LBRACE,
    "}": RBRACE,
    "[": LBRACKET,
    "]": RBRACKET,
    ":": COLON,
    ",": COMMA,
}

# Checked in this order; the first match wins.
_LITERALS = (
    ("true", BOOLEAN),
    ("false", BOOLEAN),
    ("null", NULL),
)

_DIGITS       = "0123456789"
_NUMBER_CHARS = _DIGITS + ".-+eE"
_EXPONENT     = "eE"
_SIGNS        = "+-"
_ESCAPES      = '"\\/bfnrtu'
_RAW_CONTROL  = "\t\n\r"

# ECMAScript \s: ASCII blanks, Unicode space separators, line/paragraph
# separators and the byte order mark. \x1c-\x1f and \x85 are not included.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Exponent checks run on the raw numeric run
_DANGLING_EXP = re.compile(r"[eE][+-]?\Z")
_SIGNED_EXP_JUNK = re.compile(r"e[+-][0-9]*[^0-9]")

# ---------------------------------------------------------------------------
# TOKEN RECORD
# ---------------------------------------------------------------------------
class Token(NamedTuple):
    """
    Immutable token record: (kind, text).

    For STRING tokens the text is the content between the quotes with escape
    pairs left as written. For INVALID tokens it is the offending fragment.
    """
    kind: str
    text: str

# ---------------------------------------------------------------------------
# STRING SCAN
# ---------------------------------------------------------------------------
def _scan_string(text: str, start: int) -> Tuple[Token, int]:
    """
    Scan a string opening at ``text[start]`` (a double quote).

    Returns the token and the index just past it. Bad escapes, raw tab /
    newline / carriage return and a missing closing quote all produce an
    INVALID token.
    """
    n = len(text)
    i = start + 1
    chunks: List[str] = []
    while i < n and text[i] != '"':
        ch = text[i]
        if ch == "\\" and i + 1 < n:
            esc = text[i + 1]
            if esc not in _ESCAPES:
                return Token(INVALID, ch + esc), i + 2
            chunks.append(ch + esc)
            i += 2
        elif ch in _RAW_CONTROL:
            return Token(INVALID, ch), i + 1
        else:
            chunks.append(ch)
            i += 1

    if i < n:
        return Token(STRING, "".join(chunks)), i + 1
    # Ran off the end of the buffer - unterminated
    return Token(INVALID, "".join(chunks)), i

# ---------------------------------------------------------------------------
# NUMBER SCAN
# ---------------------------------------------------------------------------
def _has_leading_zero(num: str) -> bool:
    body = num[1:] if num.startswith("-") else num
    return len(body) > 1 and body[0] == "0" and body[1] in _DIGITS

def _bad_exponent(num: str) -> bool:
    """True when an exponent marker dangles, or a signed lowercase exponent
    runs into a non-digit (`1e+5.3`)."""
    return bool(_DANGLING_EXP.search(num) or _SIGNED_EXP_JUNK.search(num))

def _scan_number(text: str, start: int) -> Tuple[Token, int]:
    """
    Greedily consume a numeric run, then judge its shape.

    The run may hold digits, '.', '-', '+', 'e' and 'E'; an exponent marker
    directly followed by a sign is taken as one unit.
    """
    n = len(text)
    i = start
    while i < n and text[i] in _NUMBER_CHARS:
        if text[i] in _EXPONENT and i + 1 < n and text[i + 1] in _SIGNS:
            i += 2
        else:
            i += 1

    num = text[start:i]
    if _has_leading_zero(num) or _bad_exponent(num):
        return Token(INVALID, num), i
    return Token(NUMBER, num), i

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def tokenize(text: str) -> List[Token]:
    """
    Convert raw text into a list of tokens in document order.

    Total function: lexical errors are returned as a trailing INVALID token
    and the rest of the input is discarded.
    """
    tokens: List[Token] = []
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]

        kind = _STRUCTURAL.get(ch)
        if kind is not None:
            tokens.append(Token(kind, ch))
            i += 1
            continue

        if ch == '"':
            tok, i = _scan_string(text, i)
        elif ch in _DIGITS or ch == "-":
            tok, i = _scan_number(text, i)
        elif ch in _WHITESPACE:
            i += 1
            continue
        else:
            for word, word_kind in _LITERALS:
                if text.startswith(word, i):
                    tok = Token(word_kind, word)
                    i += len(word)
                    break
            else:
                tok = Token(INVALID, ch)
                i += 1

        tokens.append(tok)
        if tok.kind == INVALID:
            break

    return tokens

__all__ = [
    "Token", "tokenize",
    "LBRACE", "RBRACE", "LBRACKET", "RBRACKET", "COLON", "COMMA",
    "STRING", "NUMBER", "BOOLEAN", "NULL", "INVALID",
]
