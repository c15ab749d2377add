"""
substance-jsx

JSX runtime for builder-style UI backends. Declarative element calls
(`tag`, props, children) are translated into imperative construction calls
on a host builder: `create()`, then `on()`, `ref()`, `val()` and `append()`.
"""

# Entry points
from .jsx_runtime import Translator, translate, dom, is_composite

# Configuration
from .config import (
    RenameRule,
    TranslatorConfig,
    DEFAULT_CONFIG,
    DEFAULT_RENAME_RULES,
)

# Translation steps
from .models import EventBinding, RenamedProp, SpecialProp, ConstructionPlan
from .extract import (
    extract_event_handlers,
    extract_renamed_props,
    extract_special_props,
    tidy_props,
    merge_renamed_props,
)
from .assembler import HostBuilder, HostNode, create_component

# Errors
from .errors import SubstanceJSXError, MissingBuilderError, RuleConflictError, TreeFormatError

# Recording builder
from .recording import ComponentRef, RecordingBuilder, RecordedNode

__all__ = [
    # Entry points
    'Translator',
    'translate',
    'dom',
    'is_composite',
    # Configuration
    'RenameRule',
    'TranslatorConfig',
    'DEFAULT_CONFIG',
    'DEFAULT_RENAME_RULES',
    # Translation steps
    'EventBinding',
    'RenamedProp',
    'SpecialProp',
    'ConstructionPlan',
    'extract_event_handlers',
    'extract_renamed_props',
    'extract_special_props',
    'tidy_props',
    'merge_renamed_props',
    'HostBuilder',
    'HostNode',
    'create_component',
    # Errors
    'SubstanceJSXError',
    'MissingBuilderError',
    'RuleConflictError',
    'TreeFormatError',
    # Recording builder
    'ComponentRef',
    'RecordingBuilder',
    'RecordedNode',
]

__version__ = '1.0.0'
