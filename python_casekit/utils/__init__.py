from .logger import JsonFormatter, setup_logging
from .string_case import (
	CASE_STYLES,
	convert,
	is_letter_or_digit,
	is_lower_or_digit,
	is_upper,
	normalize_style,
	split_words,
	split_words_camel,
	to_camel_case,
	to_constant_case,
	to_dot_case,
	to_kebab_case,
	to_pascal_case,
	to_snake_case,
)

__all__ = [
	"CASE_STYLES",
	"JsonFormatter",
	"convert",
	"is_letter_or_digit",
	"is_lower_or_digit",
	"is_upper",
	"normalize_style",
	"setup_logging",
	"split_words",
	"split_words_camel",
	"to_camel_case",
	"to_constant_case",
	"to_dot_case",
	"to_kebab_case",
	"to_pascal_case",
	"to_snake_case",
]
