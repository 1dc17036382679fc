"""
Arg parsing, reading the CSV input and printing the results.
"""

import argparse
import csv
import json
import logging
import math
import sys
from operator import add, itemgetter

from ordered_set import OrderedSet

from alistextra.config import read_config
from alistextra.extra import filter_group_by, from_list_by, from_list_dedupe, frequencies, invert, keep_only, map_values, remove_many
from alistextra.logger import setup_logger

log = logging.getLogger(__name__)

class CliError(ValueError):
    """Bad input from the user: unknown column, missing argument, unparseable number..."""

def number(cell):
    try:
        return int(cell)
    except (TypeError, ValueError):
        pass
    try:
        n = float(cell)
    except (TypeError, ValueError):
        raise CliError("not a number: {!r}".format(cell)) from None
    if not math.isfinite(n): # nan and inf can't be written out as JSON
        raise CliError("not a finite number: {!r}".format(cell))
    return n

def read_rows(stream, delimiter=','):
    reader = csv.DictReader(stream, delimiter=delimiter)
    rows = []
    for row in reader:
        if None in row.values():
            raise CliError("line {}: expected {} fields, got {}".format(reader.line_num, len(reader.fieldnames), sum(v is not None for v in row.values())))
        rows.append(row)
    return reader.fieldnames or [], rows

def read_file(path, delimiter=','):
    try:
        with open(path, newline='') as f:
            return read_rows(f, delimiter)
    except OSError as e:
        raise CliError("can't read {}: {}".format(path, e.strerror or e)) from None

def start_logging(level):
    try:
        return setup_logger(level=level)
    except ValueError:
        raise CliError("unknown log level: {!r}".format(level)) from None

def check_columns(fieldnames, *columns):
    for c in columns:
        if c is None:
            raise CliError("this operation needs a VALUE column")
        if c not in fieldnames:
            raise CliError("unknown column {!r} (have: {})".format(c, ", ".join(fieldnames)))

def op_count(rows, key, value):
    return frequencies(row[key] for row in rows)

def op_group(rows, key, value):
    groups = filter_group_by(lambda row: row[key] or None, rows) # empty cells don't get a group
    return map_values(lambda rs: [r[value] for r in rs], groups)

def op_index(rows, key, value):
    return map_values(itemgetter(value), from_list_by(itemgetter(key), rows))

def op_sum(rows, key, value):
    return from_list_dedupe(add, [(row[key], number(row[value])) for row in rows])

def op_invert(rows, key, value):
    return invert(op_index(rows, key, value))

# operation name -> (function, needs a value column)
op_lookup = {
    'count': (op_count, False),
    'group': (op_group, True),
    'index': (op_index, True),
    'sum': (op_sum, True),
    'invert': (op_invert, True),
}

def run_operation(name, rows, fieldnames, key, value=None):
    op, needs_value = op_lookup[name]
    check_columns(fieldnames, key, *([value] if needs_value else []))
    return op(rows, key, value)

def restrict(result, only=None, drop=None):
    """Apply --only and --drop. --only also decides the order of the output."""
    if only:
        result = keep_only(OrderedSet(only), result)
    if drop:
        result = remove_many(OrderedSet(drop), result)
    return result

def fmt_value(v):
    if isinstance(v, list):
        return ", ".join(map(str, v))
    return str(v)

def print_result(result, as_json=False, out=None):
    if as_json:
        print(json.dumps(result), file=out)
        return
    for k, v in result.items():
        print("{}\t{}".format(k, fmt_value(v)), file=out)

def make_parser():
    parser = argparse.ArgumentParser(prog='alistextra', description="Build association lists out of the rows of a CSV file.")
    parser.add_argument('-c', '--config', help="Path to an INI file whose [args] section overrides the defaults. Defaults to config.cfg (or $ALISTEXTRA_CONFIG).")
    parser.add_argument('-d', '--delimiter', help="CSV field delimiter", default=',')
    parser.add_argument('-f', '--file', help="CSV file to read. Reads stdin if not given.")
    parser.add_argument('--json', help="Print the result as a JSON object", action='store_true', default=False)
    parser.add_argument('--only', help="Only show these keys, in this order", nargs='+')
    parser.add_argument('--drop', help="Don't show these keys", nargs='+')
    parser.add_argument('--log-level', dest='log_level', help="DEBUG, INFO, WARNING...")
    parser.add_argument('operation', choices=sorted(op_lookup), help="count KEY | group KEY VALUE | index KEY VALUE | sum KEY VALUE | invert KEY VALUE")
    parser.add_argument('key', help="Column to key the result by")
    parser.add_argument('value', nargs='?', help="Column holding the values")
    return parser

def parse_args(argv=None, config=None):
    """Parse argv. Values from the config file replace the parser defaults but not explicit flags."""
    parser = make_parser()
    if config is None:
        pre, _ = parser.parse_known_args(argv)
        config = read_config(pre.config)
    parser.set_defaults(**config)
    return parser.parse_args(argv)

def main(argv=None, config=None):
    args = parse_args(argv, config)

    try:
        start_logging(args.log_level)
        log.debug("arguments: %s", vars(args))
        if args.file:
            fieldnames, rows = read_file(args.file, args.delimiter)
        else:
            fieldnames, rows = read_rows(sys.stdin, args.delimiter)
        log.info("read %d rows with columns %s", len(rows), fieldnames)

        result = run_operation(args.operation, rows, fieldnames, args.key, args.value)
    except CliError as e:
        print("alistextra: error: {}".format(e), file=sys.stderr)
        return 2

    result = restrict(result, args.only, args.drop)
    if not result:
        print("Nothing to show!")
        return 1
    print_result(result, args.json)
    return 0

if __name__ == "__main__":
    sys.exit(main())
