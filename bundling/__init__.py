# tu-bundle - Core Bundling Components
"""
Core modules for turning a C/C++ project into one translation unit:
- models: SourceFile and request models, input validation
- languages: language tags and source/header classification
- file_index: lookup of include names against the submitted files
- entry: selection of the file that holds main()
- expander: recursive inlining of quoted includes
- assembler: ordering and concatenation into main.cpp / main.c
- errors: exception types
- remote: submission to a compile-and-run service
"""

from .errors import TuBundleError, BundleInputError, BundleConfigError, RemoteRunError
from .models import SourceFile, BundleRequest
from .file_index import FileIndex
from .expander import ExpansionContext, expand
from .assembler import assemble

__all__ = [
    'TuBundleError',
    'BundleInputError',
    'BundleConfigError',
    'RemoteRunError',
    'SourceFile',
    'BundleRequest',
    'FileIndex',
    'ExpansionContext',
    'expand',
    'assemble',
]
