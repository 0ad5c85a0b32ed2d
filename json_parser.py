# json_parser.py
# Hand-rolled JSON grammar checker and directory validator
# Author: Bradley Saucier - call sign viper1
#
# Disclaimer:
# This is a personal project submitted for a coding competition.
# It does not represent or reflect the views, policies, or positions
# of the United States Department of Defense or Anduril Industries.
#
# =============================================================================
#  CHECKER IMPLEMENTATION: RECURSIVE DESCENT OVER A TOKEN LIST
# =============================================================================
#
# The checker walks the token list produced by lexer.tokenize() with three
# mutually recursive rules - value, object, array - and answers a single
# question: is this document JSON? [geeksforgeeks.org, Recursive Descent
# Parser; cs.rochester.edu, Recursive-Descent Parsing].
#
# Design Rationale:
# 1. Every rule returns (accepted, next_cursor). Failures are plain False
#    values, never exceptions, so the verdict is a pure function of the text.
# 2. The cursor only moves forward. No rule rewinds past its own start, so a
#    document is checked in one pass [online.stanford.edu, Compilers I].
# 3. Object and array bodies are small state machines. A member must be
#    followed by a comma or the closer, and a comma must be followed by a
#    member, which rules out trailing and doubled commas.
#
# Depth guard defaults to 38 nested containers, a defensive measure against
# resource-exhaustion payloads [RFC 8259; hypertextbookshop.com, Parser Error
# Handling and Recovery].
#
# =============================================================================
#  REFERENCES
# =============================================================================
# [1] geeksforgeeks.org - Recursive Descent Parser
# [2] cs.rochester.edu - Recursive-Descent Parsing
# [3] online.stanford.edu - Compilers I
# [4] RFC 8259 - The JavaScript Object Notation (JSON) standard
# [5] hypertextbookshop.com - Parser Error Handling and Recovery
# =============================================================================

import argparse
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import List, NamedTuple, Optional, Sequence, Tuple

from lexer import (
    BOOLEAN, COLON, COMMA, LBRACE, LBRACKET, NULL, NUMBER, RBRACE, RBRACKET,
    STRING, Token, tokenize,
)

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT  = 38        # Deepest container nesting still accepted
READ_WORKERS_DEFAULT = 8         # Threads used to read files from a directory
JSON_SUFFIX          = ".json"

_SCALARS = frozenset((STRING, NUMBER, BOOLEAN, NULL))
_ROOTS   = (LBRACE, LBRACKET)

# Container states
_EXPECT_KEY      = "key"
_EXPECT_COLON    = "colon"
_EXPECT_VALUE    = "value"
_EXPECT_SEP      = "comma-or-close"

Result = Tuple[bool, int]

# ---------------------------------------------------------------------------
# CORE VALUE RULE
# ---------------------------------------------------------------------------
def _parse_value(tokens: Sequence[Token], pos: int, depth: int, max_depth: int) -> Result:
    """
    Dispatch on the token at ``pos``. Scalars consume one token; braces and
    brackets descend one level deeper.
    """
    if depth > max_depth or pos >= len(tokens):
        return False, pos

    kind = tokens[pos].kind
    if kind in _SCALARS:
        return True, pos + 1
    if kind == LBRACE:
        return _parse_object(tokens, pos, depth + 1, max_depth)
    if kind == LBRACKET:
        return _parse_array(tokens, pos, depth + 1, max_depth)
    return False, pos

# ---------------------------------------------------------------------------
# OBJECT RULE
# ---------------------------------------------------------------------------
def _parse_object(tokens: Sequence[Token], start: int, depth: int, max_depth: int) -> Result:
    """
    Check an object opening at ``start``.

    States cycle key -> colon -> value -> comma-or-close. A closing brace is
    only accepted when the previous token was not a comma, so ``{}`` passes
    and ``{"a":1,}`` does not.
    """
    end = len(tokens)
    if depth > max_depth or start >= end or tokens[start].kind != LBRACE:
        return False, start

    pos = start + 1
    state = _EXPECT_KEY
    last_was_comma = False
    while pos < end:
        kind = tokens[pos].kind
        if state == _EXPECT_KEY:
            if kind == RBRACE:
                return not last_was_comma, pos + 1
            if kind != STRING:
                return False, pos
            state = _EXPECT_COLON
            last_was_comma = False
        elif state == _EXPECT_COLON:
            if kind != COLON:
                return False, pos
            state = _EXPECT_VALUE
        elif state == _EXPECT_VALUE:
            ok, pos = _parse_value(tokens, pos, depth, max_depth)
            if not ok:
                return False, pos
            follow = tokens[pos].kind if pos < end else None
            if follow == COMMA:
                state = _EXPECT_KEY
                last_was_comma = True
            elif follow == RBRACE:
                return True, pos + 1
            else:
                # Whatever follows is judged on the next pass
                state = _EXPECT_SEP
                last_was_comma = False
                continue
        else:
            if kind == COMMA:
                if last_was_comma:
                    return False, pos
                state = _EXPECT_KEY
                last_was_comma = True
            elif kind == RBRACE:
                return not last_was_comma, pos + 1
            else:
                return False, pos
        pos += 1

    # Stream ended before the closing brace
    return False, pos

# ---------------------------------------------------------------------------
# ARRAY RULE
# ---------------------------------------------------------------------------
def _parse_array(tokens: Sequence[Token], start: int, depth: int, max_depth: int) -> Result:
    """
    Check an array opening at ``start``. Same discipline as objects, minus
    keys and colons.
    """
    end = len(tokens)
    if depth > max_depth or start >= end or tokens[start].kind != LBRACKET:
        return False, start

    pos = start + 1
    state = _EXPECT_VALUE
    last_was_comma = False
    while pos < end:
        kind = tokens[pos].kind
        if state == _EXPECT_VALUE:
            if kind == RBRACKET:
                return not last_was_comma, pos + 1
            ok, pos = _parse_value(tokens, pos, depth, max_depth)
            if not ok:
                return False, pos
            if pos < end and tokens[pos].kind == COMMA:
                last_was_comma = True
            else:
                state = _EXPECT_SEP
                last_was_comma = False
                continue
        else:
            if kind == COMMA:
                state = _EXPECT_VALUE
                last_was_comma = True
            elif kind == RBRACKET:
                return not last_was_comma, pos + 1
            else:
                return False, pos
        pos += 1

    return False, pos

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def is_valid_json(tokens: Sequence[Token], *, max_depth: int = DEPTH_LIMIT_DEFAULT) -> bool:
    """
    Decide whether a token list forms one complete JSON document.

    The root must be an object or array (bare scalars are rejected) and the
    root value must consume every token; anything left over fails.
    """
    if not tokens or tokens[0].kind not in _ROOTS:
        return False
    ok, pos = _parse_value(tokens, 0, 0, max_depth)
    return ok and pos == len(tokens)

def validate(text: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT) -> bool:
    """Tokenize ``text`` and check it. Never raises for string input."""
    return is_valid_json(tokenize(text), max_depth=max_depth)

# ---------------------------------------------------------------------------
# DIRECTORY SCAN
# ---------------------------------------------------------------------------
class FileResult(NamedTuple):
    name: str
    valid: bool
    error: Optional[str] = None

def _read_document(path: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Return (text, None) or (None, reason). Raw newlines are kept as-is and
    undecodable bytes become U+FFFD instead of failing the read.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as fh:
            return fh.read(), None
    except OSError as exc:
        return None, str(exc)

def validate_directory(directory: str, *, workers: int = READ_WORKERS_DEFAULT) -> List[FileResult]:
    """
    Validate every ``*.json`` entry of ``directory``, sorted by name.

    Files are read concurrently; a file that cannot be read yields a
    FileResult carrying the error and does not affect the others. Raises
    OSError when the directory itself cannot be listed.
    """
    names = sorted(n for n in os.listdir(directory) if n.endswith(JSON_SUFFIX))
    paths = [os.path.join(directory, n) for n in names]

    results: List[FileResult] = []
    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        for name, (text, error) in zip(names, pool.map(_read_document, paths)):
            if error is not None:
                results.append(FileResult(name, False, error))
            else:
                results.append(FileResult(name, validate(text)))
    return results

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Command-line interface: one line per .json file in the given directory.

    Exit code is 0 once the directory was listed, 1 when it could not be,
    and 2 (from argparse) when the argument is missing.
    """
    ap = argparse.ArgumentParser(prog="jsonparser", description="CCT JSON directory validator")
    ap.add_argument("directory", help="directory holding the .json files to verify")
    args = ap.parse_args(argv)

    try:
        results = validate_directory(args.directory)
    except OSError as exc:
        print(f"Error reading directory: {exc}", file=sys.stderr)
        return 1

    for res in results:
        if res.error is not None:
            print(f"Error reading file {res.name}: {res.error}", file=sys.stderr)
        else:
            print(f"{res.name}: {'Valid' if res.valid else 'Invalid'} JSON")
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    return _cli(sys.argv[1:] if argv is None else argv)

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
# viper1 out
