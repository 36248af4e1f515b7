#!/usr/bin/env python3
"""
Demo: Person record with nested fields.

This demonstrates compiling a person shorthand with:
- Required and optional fields ("string" vs "string?")
- Non-empty markers ("string!", "string[]!")
- Nested object: address with city (required)
- Native class checks: birthday (date), avatar (buffer?)
"""

import datetime
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from typecheck_shorthand import build_type_check
from typecheck_shorthand.validation import format_validation_errors


def main():
    print("=" * 60)
    print("typecheck-shorthand Demo: Person Record")
    print("=" * 60)

    shorthand = {
        "id": "uuid",
        "name": "string!",
        "age": "integer?",
        "address": {
            "street": "string?",
            "city": "string!",
            "$additionalProperties": False,
        },
        "hobbies": "string[]",
        "roles": "string[]!",
        "birthday": "date",
        "avatar": "buffer?",
    }

    check, validator, parsed = build_type_check(shorthand)

    print("\nCompiled Schema:")
    print(json.dumps(parsed, indent=2))

    people = [
        {
            "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
            "name": "Alice",
            "age": 28,
            "address": {"city": "New York"},
            "hobbies": ["reading", "hiking"],
            "roles": ["admin"],
            "birthday": datetime.date(1996, 4, 2),
        },
        {
            "id": "bob",
            "name": "",
            "address": {"city": "San Francisco", "country": "US"},
            "hobbies": [],
            "roles": [],
            "birthday": "1989-11-30",
            "avatar": None,
        },
    ]

    for i, person in enumerate(people, 1):
        print("\n" + "=" * 60)
        print(f"Person {i}/{len(people)}")
        print("=" * 60)

        result = check(person)

        print(f"Valid: {'✓' if result.is_valid else '✗'} {result.is_valid}")
        if not result.is_valid:
            print(format_validation_errors(result.errors))

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
