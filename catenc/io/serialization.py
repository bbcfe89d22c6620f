"""
Vocabulary export/import for invertible encoders.

One routine per format, shared by every encoder that owns a Vocabulary:

  JSON    array of categories, position = code
  CSV     two columns `value,code` with a header row
  binary  joblib snapshot of the (hash table, value list) pair

Importing replaces the target encoder's vocabulary in a single locked step.
"""

import io
import json
import logging
from pathlib import Path

import joblib
import pandas as pd

from catenc.core.errors import VocabularyFormatError
from catenc.core.interfaces import InvertibleEncoder

log = logging.getLogger(__name__)

CSV_COLUMNS = ["value", "code"]
BINARY_FORMAT_VERSION = 1
VOCAB_FORMATS = ("json", "csv", "bin")


# ── JSON ───────────────────────────────────────────────────────────────

def to_json(encoder: InvertibleEncoder) -> str:
    return json.dumps(encoder.vocabulary.values())


def from_json(encoder: InvertibleEncoder, data: str | bytes) -> InvertibleEncoder:
    """Load a JSON array of categories into `encoder`."""
    try:
        values = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise VocabularyFormatError(f"invalid JSON vocabulary: {e}") from e

    if not isinstance(values, list):
        raise VocabularyFormatError(
            f"JSON vocabulary must be an array, got {type(values).__name__}"
        )
    for code, v in enumerate(values):
        if not isinstance(v, str):
            raise VocabularyFormatError(f"code {code}: expected a string, got {v!r}")

    _load_values(encoder, values)
    return encoder


# ── CSV ────────────────────────────────────────────────────────────────

def to_csv(encoder: InvertibleEncoder) -> str:
    values = encoder.vocabulary.values()
    df = pd.DataFrame({"value": values, "code": range(len(values))}, columns=CSV_COLUMNS)
    return df.to_csv(index=False, lineterminator="\n")


def from_csv(encoder: InvertibleEncoder, data: str) -> InvertibleEncoder:
    """Load a `value,code` table into `encoder`.

    Rows with the wrong number of fields are skipped. A row whose code is
    not a non-negative integer aborts the load, as do a missing header and
    codes that are not exactly 0..n-1.
    """
    skipped = []

    def _skip(line: list[str]):
        skipped.append(line)
        return None

    # header=None: the header row fixes the field count, longer rows go to _skip
    try:
        df = pd.read_csv(
            io.StringIO(data),
            header=None,
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=_skip,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise VocabularyFormatError(f"unreadable CSV vocabulary: {e}") from e

    header = df.iloc[0].tolist() if len(df) else []
    if not set(CSV_COLUMNS) <= set(header):
        raise VocabularyFormatError(
            f"CSV vocabulary header must contain {CSV_COLUMNS}, got {header}"
        )
    body = df.iloc[1:, [header.index("value"), header.index("code")]].copy()
    body.columns = CSV_COLUMNS

    short = body["value"].isna() | body["code"].isna()
    skipped.extend(body[short].values.tolist())
    if skipped:
        log.warning(f"CSV vocabulary: skipped {len(skipped)} malformed rows")
        for line in skipped[:10]:
            log.warning(f"  {line}")

    by_code: dict[int, str] = {}
    for row_num, value, raw_code in body[~short].itertuples(name=None):
        try:
            code = int(raw_code)
        except ValueError as e:
            raise VocabularyFormatError(f"row {row_num}: code {raw_code!r} is not an integer") from e
        if code < 0:
            raise VocabularyFormatError(f"row {row_num}: code {code} is negative")
        if code in by_code:
            raise VocabularyFormatError(f"row {row_num}: code {code} assigned twice")
        by_code[code] = value

    n = len(by_code)
    if sorted(by_code) != list(range(n)):
        missing = sorted(set(range(n)) - set(by_code))
        raise VocabularyFormatError(
            f"CSV vocabulary codes must be exactly 0..{n - 1}; missing {missing[:10]}"
        )

    _load_values(encoder, [by_code[i] for i in range(n)])
    return encoder


# ── Binary ─────────────────────────────────────────────────────────────

def to_bytes(encoder: InvertibleEncoder) -> bytes:
    table, values = encoder.vocabulary.state()
    buf = io.BytesIO()
    joblib.dump(
        {"version": BINARY_FORMAT_VERSION, "encoder": table, "decoder": values},
        buf,
    )
    return buf.getvalue()


def from_bytes(encoder: InvertibleEncoder, data: bytes) -> InvertibleEncoder:
    try:
        payload = joblib.load(io.BytesIO(data))
    except Exception as e:
        raise VocabularyFormatError(f"unreadable binary vocabulary: {e}") from e

    if not isinstance(payload, dict) or payload.get("version") != BINARY_FORMAT_VERSION:
        raise VocabularyFormatError("binary vocabulary has an unknown layout")

    table, values = payload.get("encoder"), payload.get("decoder")
    if not isinstance(table, dict) or not isinstance(values, list):
        raise VocabularyFormatError("binary vocabulary is missing its table or value list")
    try:
        encoder.vocabulary.load_state(table, values)
    except ValueError as e:
        raise VocabularyFormatError(f"inconsistent binary vocabulary: {e}") from e
    return encoder


# ── Files ──────────────────────────────────────────────────────────────

def vocab_format(path: str, default: str = "bin") -> str:
    """Format for `path`: from a known suffix, else `default`."""
    suffix = Path(path).suffix.lower().lstrip(".")
    if suffix in VOCAB_FORMATS:
        return suffix
    if default not in VOCAB_FORMATS:
        raise ValueError(f"vocabulary format must be one of {VOCAB_FORMATS}, got {default!r}")
    return default


def save_vocabulary(encoder: InvertibleEncoder, path: str, default_format: str = "bin") -> str:
    """Write the vocabulary to `path`.

    The format follows the suffix (.json, .csv, .bin); any other suffix
    uses `default_format`.
    """
    p = Path(path)
    fmt = vocab_format(path, default_format)
    p.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "json":
        p.write_text(to_json(encoder), encoding="utf-8")
    elif fmt == "csv":
        p.write_text(to_csv(encoder), encoding="utf-8")
    else:
        p.write_bytes(to_bytes(encoder))
    log.info(f"Saved vocabulary ({len(encoder)} categories, {fmt}) to {p}")
    return str(p)


def load_vocabulary(encoder: InvertibleEncoder, path: str, default_format: str = "bin") -> InvertibleEncoder:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {path}")
    fmt = vocab_format(path, default_format)
    if fmt == "json":
        from_json(encoder, p.read_text(encoding="utf-8"))
    elif fmt == "csv":
        from_csv(encoder, p.read_text(encoding="utf-8"))
    else:
        from_bytes(encoder, p.read_bytes())
    log.info(f"Loaded vocabulary ({len(encoder)} categories, {fmt}) from {p}")
    return encoder


def _load_values(encoder: InvertibleEncoder, values: list[str]) -> None:
    try:
        encoder.vocabulary.load_values(values)
    except ValueError as e:
        raise VocabularyFormatError(str(e)) from e
