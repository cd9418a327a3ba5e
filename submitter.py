"""
Request pipeline: decide whether a submission needs bundling, bundle it and
hand it to a remote compile-and-run backend.
"""
from pydantic import ValidationError

from bundling.assembler import assemble
from bundling.errors import BundleInputError
from bundling.expander import MAX_INCLUDE_DEPTH
from bundling.languages import BUNDLED_LANGUAGES, normalize_language
from bundling.log import debug_log
from bundling.models import BundleRequest, coerce_files
from bundling.remote import RunnerConfig, get_backend, load_runner_config


def should_bundle(language, files):
    """Only multi-file C and C++ submissions are bundled."""
    return normalize_language(language) in BUNDLED_LANGUAGES and len(files) > 1


def prepare_files(language, files, max_depth=MAX_INCLUDE_DEPTH):
    """
    Return the files to send for a submission.

    Multi-file C/C++ projects become a single main.cpp / main.c; anything
    else is passed through unchanged.

    Raises:
        BundleInputError: If files is not a sequence of name/content records
    """
    files = coerce_files(files)
    lang = normalize_language(language)
    if not should_bundle(lang, files):
        debug_log(f"Passing {len(files)} file(s) through unchanged (language '{lang}')")
        return files
    debug_log(f"Bundling {len(files)} {lang} file(s) into one translation unit")
    return assemble(lang, files, max_depth=max_depth)


def parse_request(data):
    """Validate a raw request mapping into a BundleRequest."""
    if isinstance(data, BundleRequest):
        return data
    if not isinstance(data, dict):
        raise BundleInputError(f"Expected a request object, got {type(data).__name__}")
    # Run files through coerce_files first for a precise error message
    files = coerce_files(data.get("files", []))
    try:
        return BundleRequest(**{**data, "files": files})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise BundleInputError(f"Invalid request field '{field}': {first['msg']}")


def build_payload(request, config=None):
    """Build the JSON body sent to the execution backend."""
    config = config or RunnerConfig()
    language = normalize_language(request.language)
    files = prepare_files(language, request.files, max_depth=config.max_include_depth)
    payload = {
        "language": language,
        "version": request.version or config.version,
        "files": [f.model_dump() for f in files],
    }
    if request.stdin is not None:
        payload["stdin"] = request.stdin
    return payload


def run_submission(data, backend=None, config=None):
    """
    Bundle a request and run it remotely.

    Args:
        data: BundleRequest or a mapping with language, version, stdin, files
        backend: ExecutionBackend to use (default: OneCompiler)
        config: RunnerConfig (default: loaded from tubundle.json)

    Returns:
        The decoded JSON response of the backend
    """
    request = parse_request(data)
    if config is None:
        config = load_runner_config()
    if backend is None:
        backend = get_backend("onecompiler", config)
    payload = build_payload(request, config)
    return backend.run(payload)
