"""Supported source-language variants and extension token resolution."""

from enum import Enum

from cppm.errors import UnsupportedExtension


class LanguageVariant(Enum):
    """A source-language flavor a project can be generated for.

    Each member carries everything the templates need to know about it.
    """

    CPP = ("cpp", "23", "CXX", "#include <iostream>",
           'std::cout << "Hello, world!" << std::endl;')
    C = ("c", "17", "C", "#include <stdio.h>",
         'printf("Hello, world!\\n");')

    def __init__(self, token, build_standard_version, build_language_id,
                 include_statement, greeting_statement):
        self.token = token
        self.build_standard_version = build_standard_version
        self.build_language_id = build_language_id
        self.include_statement = include_statement
        self.greeting_statement = greeting_statement

    def __str__(self):
        return self.token


def supported_tokens():
    return [variant.token for variant in LanguageVariant]


def resolve_variant(token: str) -> LanguageVariant:
    """Return the variant whose token matches *token*, ignoring case.

    Raises:
        UnsupportedExtension: If no variant matches.
    """
    normalized = token.lower()
    for variant in LanguageVariant:
        if variant.token == normalized:
            return variant
    raise UnsupportedExtension(token, supported_tokens())
