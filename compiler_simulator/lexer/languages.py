"""
Per-language lexical rule tables.

Each supported language gets one frozen ``LanguageProfile`` describing its
comment syntax, literal grammars, operator/punctuation sets, keyword and
builtin-name sets, and whether indentation is significant. The profiles are
collected once into a ``LanguageRegistry`` (``DEFAULT_REGISTRY``) which the
tokenizer receives explicitly.

The tables are not real grammars, just enough of each language to make the
token stream look familiar.

Author: xwest
"""

import re
from enum import Enum
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Pattern, Tuple, Union

from .errors import create_unsupported_language_error, create_missing_profile_error


class Language(Enum):
    """The closed set of languages the front-end understands."""
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    C = "c"
    CPP = "cpp"
    JAVA = "java"

    @classmethod
    def from_tag(cls, tag: Union["Language", str]) -> "Language":
        """
        Resolve a language tag.

        Accepts a ``Language`` member or a string matching a member's value
        or name (case-insensitive). Anything else is a ``ConfigError``.
        """
        if isinstance(tag, Language):
            return tag
        if isinstance(tag, str):
            wanted = tag.strip().lower()
            for language in cls:
                if wanted in (language.value, language.name.lower()):
                    return language
        raise create_unsupported_language_error(tag, [language.value for language in cls])


@dataclass(frozen=True)
class StringRule:
    """One string literal form: its quote and whether it may span lines."""
    quote: str
    multiline: bool = False


@dataclass(frozen=True)
class LanguageProfile:
    """Lexical rules for one language."""
    language: Language

    # Comments
    line_comment: str
    block_comment: Optional[Tuple[str, str]]

    # Literals, tried in order (longest quote first)
    strings: Tuple[StringRule, ...]
    char_quote: Optional[str]
    number_pattern: Pattern

    # Symbols; operators are kept sorted longest-first for maximal munch
    operators: Tuple[str, ...]
    punctuation: FrozenSet[str]

    # Words
    identifier_pattern: Pattern
    keywords: FrozenSet[str]
    builtins: FrozenSet[str]

    # Language-specific leading form (#include, @Override)
    directive_pattern: Optional[Pattern] = None
    directive_line_initial: bool = False

    uses_indentation: bool = False
    function_introducers: FrozenSet[str] = frozenset()

    @property
    def name(self) -> str:
        return self.language.value


class LanguageRegistry:
    """
    Immutable mapping from ``Language`` to its ``LanguageProfile``.

    Construction fails if any member of ``Language`` is left without a
    profile, so adding a language without its table is caught at import.
    """

    def __init__(self, profiles: Iterable[LanguageProfile]):
        self._profiles: Dict[Language, LanguageProfile] = {}
        for profile in profiles:
            self._profiles[profile.language] = profile

        for language in Language:
            if language not in self._profiles:
                raise create_missing_profile_error(language.value)

    def get(self, language: Union[Language, str]) -> LanguageProfile:
        """Look up the profile for a language tag (``ConfigError`` if unknown)."""
        return self._profiles[Language.from_tag(language)]

    def languages(self) -> List[Language]:
        return list(self._profiles)

    def __contains__(self, language: object) -> bool:
        return language in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


def _longest_first(operators: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted(set(operators), key=lambda op: (-len(op), op)))


# ============================================================================
# Shared patterns
# ============================================================================

_DECIMAL = r'(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'

SCRIPT_NUMBER = re.compile(r'0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+|' + _DECIMAL)
# Leading-zero octal is covered by the decimal branch
C_NUMBER = re.compile(r'0[xX][0-9a-fA-F]+|' + _DECIMAL + r'[lLfF]?')
JAVA_NUMBER = re.compile(r'0[xX][0-9a-fA-F]+|' + _DECIMAL + r'[lLfFdD]?')

IDENTIFIER = re.compile(r'[a-zA-Z_][a-zA-Z0-9_]*')
DOLLAR_IDENTIFIER = re.compile(r'[a-zA-Z_$][a-zA-Z0-9_$]*')

PREPROCESSOR = re.compile(r'#[a-zA-Z]+')
JAVA_ANNOTATION = re.compile(r'@[a-zA-Z][a-zA-Z0-9]*')

BRACKETS = frozenset({'(', ')', '{', '}', '[', ']'})


# ============================================================================
# Profiles
# ============================================================================

JAVASCRIPT = LanguageProfile(
    language=Language.JAVASCRIPT,
    line_comment='//',
    block_comment=('/*', '*/'),
    strings=(StringRule('"'), StringRule("'"), StringRule('`', multiline=True)),
    char_quote=None,
    number_pattern=SCRIPT_NUMBER,
    operators=_longest_first([
        '+', '-', '*', '/', '=', '==', '===', '!=', '!==', '>', '<', '>=', '<=',
        '&&', '||', '!', '++', '--', '+=', '-=', '*=', '/=', '%', '&', '|', '^',
        '~', '<<', '>>', '>>>', '...', '=>', '**', '**=', '%=', '?',
    ]),
    punctuation=BRACKETS | {';', ',', '.', ':'},
    identifier_pattern=DOLLAR_IDENTIFIER,
    keywords=frozenset({
        'if', 'else', 'while', 'for', 'function', 'return', 'var', 'let', 'const',
        'class', 'import', 'export', 'from', 'true', 'false', 'null', 'undefined',
        'try', 'catch', 'finally', 'throw', 'async', 'await', 'new', 'this',
        'super', 'extends',
    }),
    builtins=frozenset({
        'console', 'Math', 'Array', 'Object', 'String', 'Number', 'Boolean',
        'Date', 'RegExp', 'Map', 'Set', 'Promise', 'JSON', 'Error',
    }),
    function_introducers=frozenset({'function'}),
)

PYTHON = LanguageProfile(
    language=Language.PYTHON,
    line_comment='#',
    block_comment=None,
    strings=(
        StringRule('"""', multiline=True), StringRule("'''", multiline=True),
        StringRule('"'), StringRule("'"),
    ),
    char_quote=None,
    number_pattern=SCRIPT_NUMBER,
    operators=_longest_first([
        '+', '-', '*', '/', '=', '==', '!=', '>', '<', '>=', '<=', '**', '//',
        '%', '+=', '-=', '*=', '/=', '//=', '%=', '**=', '@', '@=', '&', '|',
        '^', '~', '<<', '>>', '...', '->', ':=',
    ]),
    punctuation=BRACKETS | {',', '.', ':', ';'},
    identifier_pattern=IDENTIFIER,
    keywords=frozenset({
        'if', 'else', 'elif', 'while', 'for', 'def', 'return', 'class', 'import',
        'from', 'as', 'try', 'except', 'finally', 'with', 'True', 'False', 'None',
        'and', 'or', 'not', 'in', 'is', 'lambda', 'pass', 'break', 'continue',
        'global', 'nonlocal', 'yield', 'async', 'await', 'raise', 'assert', 'del',
    }),
    builtins=frozenset({
        'print', 'input', 'len', 'range', 'list', 'dict', 'set', 'tuple', 'str',
        'int', 'float', 'bool', 'map', 'filter', 'reduce', 'sum', 'max', 'min',
        'sorted', 'zip', 'enumerate', 'open', 'file', 'os', 'sys', 'math',
        'random', 're', 'datetime', 'collections',
    }),
    uses_indentation=True,
    function_introducers=frozenset({'def'}),
)

_C_KEYWORDS = frozenset({
    'if', 'else', 'while', 'for', 'return', 'int', 'float', 'double', 'char',
    'void', 'struct', 'typedef', 'switch', 'case', 'break', 'continue',
    'default', 'do', 'const', 'static', 'extern', 'enum', 'goto', 'sizeof',
    'volatile', 'register', 'union', 'auto', 'long', 'short', 'signed',
    'unsigned', 'inline',
})

_C_OPERATORS = [
    '+', '-', '*', '/', '=', '==', '!=', '>', '<', '>=', '<=', '&&', '||', '!',
    '++', '--', '+=', '-=', '*=', '/=', '%', '&', '|', '^', '~', '<<', '>>',
    '->', '.', '%=', '&=', '|=', '^=', '<<=', '>>=', '?',
]

C = LanguageProfile(
    language=Language.C,
    line_comment='//',
    block_comment=('/*', '*/'),
    strings=(StringRule('"'),),
    char_quote="'",
    number_pattern=C_NUMBER,
    operators=_longest_first(_C_OPERATORS),
    punctuation=BRACKETS | {';', ',', ':'},
    identifier_pattern=IDENTIFIER,
    keywords=_C_KEYWORDS | {'_Bool', '_Complex', '_Imaginary'},
    builtins=frozenset({
        'printf', 'scanf', 'malloc', 'free', 'calloc', 'realloc', 'sizeof',
        'strlen', 'strcpy', 'strcmp', 'strcat', 'memcpy', 'memmove', 'memset',
        'FILE', 'stdin', 'stdout', 'stderr', 'fopen', 'fclose', 'fread',
        'fwrite', 'getchar', 'putchar',
    }),
    directive_pattern=PREPROCESSOR,
    directive_line_initial=True,
    function_introducers=frozenset({'int'}),
)

CPP = LanguageProfile(
    language=Language.CPP,
    line_comment='//',
    block_comment=('/*', '*/'),
    strings=(StringRule('"'),),
    char_quote="'",
    number_pattern=C_NUMBER,
    operators=_longest_first(_C_OPERATORS + ['::', '->*', '.*', '<=>']),
    punctuation=BRACKETS | {';', ',', ':'},
    identifier_pattern=IDENTIFIER,
    keywords=_C_KEYWORDS | {
        'class', 'namespace', 'template', 'try', 'catch', 'throw', 'using',
        'new', 'delete', 'this', 'virtual', 'friend', 'private', 'public',
        'protected', 'bool', 'true', 'false', 'nullptr', 'decltype',
        'constexpr', 'explicit', 'export', 'typeid', 'alignas', 'alignof',
        'mutable', 'noexcept', 'operator', 'override', 'final', 'thread_local',
    },
    builtins=frozenset({
        'cout', 'cin', 'endl', 'string', 'vector', 'map', 'set', 'list', 'queue',
        'stack', 'deque', 'pair', 'algorithm', 'iterator', 'iostream', 'fstream',
        'sstream',
    }),
    directive_pattern=PREPROCESSOR,
    directive_line_initial=True,
    function_introducers=frozenset({'int'}),
)

JAVA = LanguageProfile(
    language=Language.JAVA,
    line_comment='//',
    block_comment=('/*', '*/'),
    strings=(StringRule('"'),),
    char_quote="'",
    number_pattern=JAVA_NUMBER,
    operators=_longest_first([
        '+', '-', '*', '/', '=', '==', '!=', '>', '<', '>=', '<=', '&&', '||',
        '!', '++', '--', '+=', '-=', '*=', '/=', '%', '&', '|', '^', '~', '<<',
        '>>', '>>>', '%=', '&=', '|=', '^=', '<<=', '>>=', '>>>=', '->', '::',
        '?',
    ]),
    punctuation=BRACKETS | {';', ',', '.', ':'},
    identifier_pattern=DOLLAR_IDENTIFIER,
    keywords=frozenset({
        'if', 'else', 'while', 'for', 'return', 'int', 'float', 'double', 'char',
        'void', 'boolean', 'String', 'class', 'interface', 'extends',
        'implements', 'static', 'final', 'abstract', 'private', 'public',
        'protected', 'package', 'import', 'try', 'catch', 'finally', 'throw',
        'throws', 'new', 'this', 'super', 'instanceof', 'switch', 'case',
        'default', 'break', 'continue', 'enum', 'synchronized', 'volatile',
        'transient', 'native', 'true', 'false', 'null', 'byte', 'short', 'long',
        'strictfp', 'assert', 'const', 'goto',
    }),
    builtins=frozenset({
        'System', 'String', 'Integer', 'Double', 'Boolean', 'Character', 'Math',
        'Object', 'List', 'ArrayList', 'Map', 'HashMap', 'Set', 'HashSet',
        'Scanner', 'File', 'Exception', 'StringBuilder', 'StringBuffer',
        'Thread', 'Runnable', 'Comparable', 'Comparator', 'Collections',
        'Arrays', 'Stream', 'Optional',
    }),
    directive_pattern=JAVA_ANNOTATION,
    function_introducers=frozenset({'int'}),
)


def build_default_registry() -> LanguageRegistry:
    """Build the registry holding the five built-in profiles."""
    return LanguageRegistry([JAVASCRIPT, PYTHON, C, CPP, JAVA])


DEFAULT_REGISTRY = build_default_registry()
