import argparse
import os
import sys

from bundling.errors import TuBundleError
from bundling.languages import infer_language, normalize_language
from bundling.log import log, set_verbose, warn
from bundling.models import BundleRequest, SourceFile
from bundling.remote import load_runner_config
from submitter import prepare_files, run_submission


def read_sources(paths):
    """Read files from disk, keeping each name exactly as given on the command line."""
    files = []
    for path in paths:
        if not os.path.isfile(path):
            print(f"Error: File '{path}' not found.", file=sys.stderr)
            sys.exit(1)
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            files.append(SourceFile(name=path, content=f.read()))
    return files


def resolve_language(args, files):
    if args.lang:
        return normalize_language(args.lang)
    lang = infer_language([f.name for f in files])
    if lang is None:
        print("Error: Cannot infer the language from file extensions; pass --lang.", file=sys.stderr)
        sys.exit(1)
    return lang


def cmd_bundle(args):
    files = read_sources(args.files)
    lang = resolve_language(args, files)
    try:
        config = load_runner_config()
        result = prepare_files(lang, files, max_depth=config.max_include_depth)
    except TuBundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if len(result) > 1:
        warn(f"Nothing to bundle for language '{lang}'; writing files one after another")
    text = "\n".join(f.content for f in result)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text)
        log(f"Wrote {len(files)} input file(s) to {args.output}")
    else:
        sys.stdout.write(text)


def cmd_run(args):
    files = read_sources(args.files)
    lang = resolve_language(args, files)
    stdin_text = None
    if args.stdin:
        with open(args.stdin, 'r', encoding='utf-8') as f:
            stdin_text = f.read()

    request = BundleRequest(language=lang, version=args.version, stdin=stdin_text, files=files)
    try:
        data = run_submission(request)
    except TuBundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if data.get("stdout"):
        sys.stdout.write(data["stdout"])
    if data.get("stderr"):
        sys.stderr.write(data["stderr"])
    if data.get("exception"):
        print(data["exception"], file=sys.stderr)
    status = data.get("status", "unknown")
    log(f"Remote run finished: {status}")
    if status not in ("success", "unknown"):
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Bundle multi-file C/C++ projects into one translation unit")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    subparsers = parser.add_subparsers(dest="command")

    bundle = subparsers.add_parser("bundle", help="Bundle files into main.cpp / main.c")
    bundle.add_argument("files", nargs="+", help="Source and header files")
    bundle.add_argument("--lang", help="c or cpp (default: inferred from extensions)")
    bundle.add_argument("-o", "--output", help="Output file (default: stdout)")

    run = subparsers.add_parser("run", help="Bundle files and run them on the remote compiler")
    run.add_argument("files", nargs="+", help="Source and header files")
    run.add_argument("--lang", help="c or cpp (default: inferred from extensions)")
    run.add_argument("--version", help="Compiler version (default: from config, 'latest')")
    run.add_argument("--stdin", help="File whose content is passed as program stdin")

    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    if args.command == "bundle": cmd_bundle(args)
    elif args.command == "run": cmd_run(args)
    else: parser.print_help()


if __name__ == "__main__":
    main()
