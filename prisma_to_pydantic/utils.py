"""
Utility functions for the Prisma to Pydantic generator.
"""

import re

from . import __version__

GENERATOR_NAME = "prisma-pydantic-generator"

# Any capital that follows a letter or digit starts a new word, so runs of
# capitals split per letter ("userID" -> "user_i_d").
_WORD_BOUNDARY = re.compile(r"(?<=[A-Za-z0-9])(?=[A-Z])")


def to_snake_case(text: str) -> str:
    """Convert camelCase or PascalCase text to snake_case.

    Examples:
        "createdAt" -> "created_at"
        "UserProfile" -> "user_profile"
        "userID" -> "user_i_d"
        "created_at" -> "created_at"

    Args:
        text: The identifier to convert

    Returns:
        snake_case string
    """
    return _WORD_BOUNDARY.sub("_", text).lower()


def model_to_file_name(model_name: str) -> str:
    """Module name (without extension) for a generated model file."""
    return to_snake_case(model_name)


def escape_string(text: str) -> str:
    """Escape text for a double-quoted Python string literal."""
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r")


def format_docstring(text: str, indent: str = "    ") -> str:
    """Render documentation as an indented docstring.

    Single-line text stays on one line; multi-line text opens and closes the
    docstring on lines of their own.
    """
    body = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    lines = body.splitlines() or [""]
    if len(lines) == 1:
        line = lines[0]
        if line.endswith('"'):
            line = line[:-1] + '\\"'
        return f'{indent}"""{line}"""'

    out = [f'{indent}"""']
    out.extend(f"{indent}{line}" if line.strip() else "" for line in lines)
    out.append(f'{indent}"""')
    return "\n".join(out)


def file_header() -> str:
    """Comment block placed at the top of every generated Python file."""
    return f"# Generated by {GENERATOR_NAME} {__version__}. Do not edit manually.\n\n"
