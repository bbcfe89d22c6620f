"""
catenc CLI.

Usage:
    python main.py encode --input data.csv --column city --output codes.csv
    python main.py encode --input data.csv --column city --scheme james_stein_classification --target label
    python main.py decode --vocab vocab.json 0 3 7
    python main.py schemes
"""

import argparse
import logging
import sys

import numpy as np
import pandas as pd

from catenc.core.errors import EncoderError
from catenc.core.interfaces import InvertibleEncoder, ObservationEncoder
from catenc.encoders.onehot import OneHotEncoder
from catenc.encoders.ordinal import OrdinalEncoder
from catenc.encoders.registry import create_encoder, list_encoders
from catenc.io.serialization import load_vocabulary, save_vocabulary
from catenc.utils.config import default_vocab_format, encoder_kwargs, load_config, log_level

log = logging.getLogger("catenc")

TARGET_SCHEMES = ("james_stein_regression", "james_stein_classification")


def _read_column(path: str, column: str) -> pd.Series:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not in {path}. Available: {list(df.columns)}")
    return df[column]


def cmd_encode(args, cfg: dict) -> int:
    scheme = args.scheme or cfg["encoding"]["scheme"]
    kwargs = encoder_kwargs(cfg, scheme)
    if args.window is not None and scheme == "rolling_frequency":
        kwargs["window"] = args.window
    if args.reserve_empty and scheme in ("ordinal", "onehot"):
        kwargs["reserve_empty"] = True

    values = _read_column(args.input, args.column)
    target = None
    if scheme in TARGET_SCHEMES:
        if not args.target:
            log.error(f"Scheme '{scheme}' needs --target")
            return 1
        target = _read_column(args.input, args.target)
        if scheme == "james_stein_regression":
            target = pd.to_numeric(target)

    encoder = create_encoder(scheme, **kwargs)
    encoder.fit(values, target)

    if isinstance(encoder, OneHotEncoder):
        matrix = encoder.encode_matrix(values)
        cols = [f"{args.column}={v}" for v in encoder.values()]
        out = pd.DataFrame(matrix, columns=cols)
    elif isinstance(encoder, ObservationEncoder):
        out = pd.DataFrame({args.column: encoder.codes()})
    else:
        out = pd.DataFrame({args.column: np.asarray(encoder.encode_many(values))})

    out.to_csv(args.output, index=False)
    log.info(f"{scheme}: wrote {len(out)} rows to {args.output}")

    if args.vocab_out:
        if isinstance(encoder, InvertibleEncoder):
            save_vocabulary(encoder, args.vocab_out, default_vocab_format(cfg))
        else:
            log.warning(f"{scheme} is one-way; no vocabulary to export")
    return 0


def cmd_decode(args, cfg: dict) -> int:
    encoder = OrdinalEncoder()
    load_vocabulary(encoder, args.vocab, default_vocab_format(cfg))
    for code in args.codes:
        print(encoder.decode(code))
    return 0


def cmd_schemes(args, cfg: dict) -> int:
    for name in list_encoders():
        print(name)
    return 0


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="catenc CLI")
    p.add_argument("--config", default="configs/default.yaml")
    p.add_argument("--log-level")
    sub = p.add_subparsers(dest="command")

    enc = sub.add_parser("encode")
    enc.add_argument("--input", required=True)
    enc.add_argument("--column", required=True)
    enc.add_argument("--output", required=True)
    enc.add_argument("--scheme", choices=list_encoders())
    enc.add_argument("--target")
    enc.add_argument("--window", type=int)
    enc.add_argument("--reserve-empty", action="store_true")
    enc.add_argument("--vocab-out")

    dec = sub.add_parser("decode")
    dec.add_argument("--vocab", required=True)
    dec.add_argument("codes", type=int, nargs="+")

    sub.add_parser("schemes")

    args = p.parse_args(argv)
    logging.basicConfig(format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    commands = {"encode": cmd_encode, "decode": cmd_decode, "schemes": cmd_schemes}
    if args.command not in commands:
        p.print_help()
        return 1
    try:
        cfg = load_config(args.config)
        # --log-level overrides logging.level from the config
        log.setLevel((args.log_level or log_level(cfg)).upper())
        return commands[args.command](args, cfg)
    except (EncoderError, FileNotFoundError, ValueError) as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
