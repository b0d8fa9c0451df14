"""Built-in C# settings: token kinds, modifier keywords and grammar sections.

``TOKEN_TEXTS`` maps every token kind the generator may meet to its source
spelling. Kinds whose spelling depends on the input (identifiers, literals,
end-of-file and friends) map to the empty string.
"""

from __future__ import annotations

from typing import Dict, Tuple

GRAMMAR_NAME = "csharp"
ROOT_TYPE = "CSharpSyntaxNode"

# ---------------------------------------------------------------------------
# Token kinds
# ---------------------------------------------------------------------------

PUNCTUATION: Dict[str, str] = {
    "TildeToken": "~",
    "ExclamationToken": "!",
    "DollarToken": "$",
    "PercentToken": "%",
    "CaretToken": "^",
    "AmpersandToken": "&",
    "AsteriskToken": "*",
    "OpenParenToken": "(",
    "CloseParenToken": ")",
    "MinusToken": "-",
    "PlusToken": "+",
    "EqualsToken": "=",
    "OpenBraceToken": "{",
    "CloseBraceToken": "}",
    "OpenBracketToken": "[",
    "CloseBracketToken": "]",
    "BarToken": "|",
    "BackslashToken": "\\",
    "ColonToken": ":",
    "SemicolonToken": ";",
    "DoubleQuoteToken": '"',
    "SingleQuoteToken": "'",
    "LessThanToken": "<",
    "CommaToken": ",",
    "GreaterThanToken": ">",
    "DotToken": ".",
    "QuestionToken": "?",
    "HashToken": "#",
    "SlashToken": "/",
    "DotDotToken": "..",
    "SlashGreaterThanToken": "/>",
    "LessThanSlashToken": "</",
    "XmlCommentStartToken": "<!--",
    "XmlCommentEndToken": "-->",
    "XmlCDataStartToken": "<![CDATA[",
    "XmlCDataEndToken": "]]>",
    "XmlProcessingInstructionStartToken": "<?",
    "XmlProcessingInstructionEndToken": "?>",
    "BarBarToken": "||",
    "AmpersandAmpersandToken": "&&",
    "MinusMinusToken": "--",
    "PlusPlusToken": "++",
    "ColonColonToken": "::",
    "QuestionQuestionToken": "??",
    "MinusGreaterThanToken": "->",
    "ExclamationEqualsToken": "!=",
    "EqualsEqualsToken": "==",
    "EqualsGreaterThanToken": "=>",
    "LessThanEqualsToken": "<=",
    "LessThanLessThanToken": "<<",
    "LessThanLessThanEqualsToken": "<<=",
    "GreaterThanEqualsToken": ">=",
    "GreaterThanGreaterThanToken": ">>",
    "GreaterThanGreaterThanEqualsToken": ">>=",
    "GreaterThanGreaterThanGreaterThanToken": ">>>",
    "GreaterThanGreaterThanGreaterThanEqualsToken": ">>>=",
    "SlashEqualsToken": "/=",
    "AsteriskEqualsToken": "*=",
    "BarEqualsToken": "|=",
    "AmpersandEqualsToken": "&=",
    "PlusEqualsToken": "+=",
    "MinusEqualsToken": "-=",
    "CaretEqualsToken": "^=",
    "PercentEqualsToken": "%=",
    "QuestionQuestionEqualsToken": "??=",
    "InterpolatedStringStartToken": '$"',
    "InterpolatedVerbatimStringStartToken": '$@"',
    "InterpolatedStringEndToken": '"',
    "InterpolatedSingleLineRawStringStartToken": '$"""',
    "InterpolatedMultiLineRawStringStartToken": '$"""',
    "InterpolatedRawStringEndToken": '"""',
}

# Keywords whose spelling is not simply the lowercased kind name.
_KEYWORD_SPELLINGS: Dict[str, str] = {
    "ArgListKeyword": "__arglist",
    "MakeRefKeyword": "__makeref",
    "RefTypeKeyword": "__reftype",
    "RefValueKeyword": "__refvalue",
    "ReferenceKeyword": "r",
}

_KEYWORDS: Tuple[str, ...] = (
    # reserved
    "Bool", "Byte", "SByte", "Short", "UShort", "Int", "UInt", "Long",
    "ULong", "Double", "Float", "Decimal", "String", "Char", "Void", "Object",
    "TypeOf", "SizeOf", "Null", "True", "False", "If", "Else", "While", "For",
    "ForEach", "Do", "Switch", "Case", "Default", "Try", "Catch", "Finally",
    "Lock", "Goto", "Break", "Continue", "Return", "Throw", "Public",
    "Private", "Internal", "Protected", "Static", "ReadOnly", "Sealed",
    "Const", "Fixed", "StackAlloc", "Volatile", "New", "Override", "Abstract",
    "Virtual", "Event", "Extern", "Ref", "Out", "In", "Is", "As", "Params",
    "ArgList", "MakeRef", "RefType", "RefValue", "This", "Base", "Namespace",
    "Using", "Class", "Struct", "Interface", "Enum", "Delegate", "Checked",
    "Unchecked", "Unsafe", "Operator", "Explicit", "Implicit",
    # contextual
    "Yield", "Partial", "Alias", "Global", "Assembly", "Module", "Type",
    "Field", "Method", "Param", "Property", "TypeVar", "Get", "Set", "Add",
    "Remove", "Where", "From", "Group", "Join", "Into", "Let", "By", "Select",
    "OrderBy", "On", "Equals", "Ascending", "Descending", "NameOf", "Async",
    "Await", "When", "Or", "And", "Not", "With", "Init", "Record", "Managed",
    "Unmanaged", "Required", "Scoped", "File", "Allows",
    # preprocessor
    "Elif", "EndIf", "Region", "EndRegion", "Define", "Undef", "Warning",
    "Error", "Line", "Pragma", "Hidden", "Checksum", "Disable", "Restore",
    "Reference", "Load", "Nullable", "Enable", "Warnings", "Annotations",
)

KEYWORDS: Dict[str, str] = {
    name + "Keyword": _KEYWORD_SPELLINGS.get(name + "Keyword", name.lower())
    for name in _KEYWORDS
}

# Kinds with no fixed spelling.
UNSPELLED: Tuple[str, ...] = (
    "EndOfFileToken",
    "EndOfDirectiveToken",
    "EndOfDocumentationCommentToken",
    "OmittedTypeArgumentToken",
    "OmittedArraySizeExpressionToken",
    "BadToken",
    "IdentifierToken",
    "NumericLiteralToken",
    "CharacterLiteralToken",
    "StringLiteralToken",
    "Utf8StringLiteralToken",
    "SingleLineRawStringLiteralToken",
    "MultiLineRawStringLiteralToken",
    "Utf8SingleLineRawStringLiteralToken",
    "Utf8MultiLineRawStringLiteralToken",
    "XmlEntityLiteralToken",
    "XmlTextLiteralToken",
    "XmlTextLiteralNewLineToken",
    "InterpolatedStringTextToken",
)

TOKEN_TEXTS: Dict[str, str] = {
    **PUNCTUATION,
    **KEYWORDS,
    **{kind: "" for kind in UNSPELLED},
}

# ---------------------------------------------------------------------------
# Grammar layout
# ---------------------------------------------------------------------------

# Values of the compiler's declaration-modifier flags, in declaration order.
DECLARATION_MODIFIERS: Tuple[str, ...] = (
    "None",
    "Abstract",
    "Sealed",
    "Static",
    "New",
    "Public",
    "Protected",
    "Internal",
    "ProtectedInternal",
    "Private",
    "PrivateProtected",
    "ReadOnly",
    "Const",
    "Volatile",
    "Extern",
    "Partial",
    "Unsafe",
    "Fixed",
    "Virtual",
    "Override",
    "Indexer",
    "Async",
    "Ref",
    "Required",
    "Scoped",
    "File",
    "All",
)

# Rules the grammar bottoms out in. They are emitted as comments pointing at
# the lexical grammar instead of real content.
LEXICAL_TOKENS: Tuple[str, ...] = (
    "Token",
    "IdentifierToken",
    "CharacterLiteralToken",
    "StringLiteralToken",
    "NumericLiteralToken",
    "InterpolatedStringTextToken",
    "XmlTextLiteralToken",
)

# Base nodes with many derived nodes. Reaching one of these while walking
# another rule does not print it on the spot, so the document keeps all
# member declarations together, all statements together, and so on.
# Without this, CompilationUnit would drag expressions in early through
# CompilationUnit -> AttributeList -> AttributeArgument -> Expression.
MAJOR_SECTIONS: Tuple[str, ...] = (
    "CompilationUnitSyntax",
    "MemberDeclarationSyntax",
    "StatementSyntax",
    "ExpressionSyntax",
    "TypeSyntax",
    "XmlNodeSyntax",
    "StructuredTriviaSyntax",
)
