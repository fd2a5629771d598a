#!/usr/bin/env python3
"""
Example usage of the LD Transformer.

This script encodes a JSON structure as LD text, decodes it again and
converts a multi-record LD stream into JSON lines.
"""

import io
import json

from src.ld_transformer import ConverterConfig, ConversionError, LDTransformer


def main():
    """Main example function."""
    print("LD Transformer Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        "title": "Release notes",
        "version": 3,
        "stable": None,
        "summary": (
            "This release improves start-up time, fixes a crash when opening "
            "empty projects and adds a dark theme that follows the system setting."
        ),
        "contributors": [
            {"name": "Alice Johnson", "commits": 42},
            {"name": "Bob Smith", "commits": 17},
        ],
        "notes": "~~:$ lines like this one are escaped on output",
    }

    json_string = json.dumps(sample_data, indent=2)
    print(f"Original JSON size: {len(json_string)} characters\n")

    # Narrow width to show wrapping
    transformer = LDTransformer(ConverterConfig(wrap_width=60, json_indent=2))

    print("Encoding JSON as LD...")
    output = io.StringIO()
    result = transformer.json_to_ld(io.StringIO(json_string), output)
    if not result.success:
        print("❌ Failed to encode JSON")
        for error in result.errors:
            print(f"   Error: {error}")
        return

    ld_text = output.getvalue()
    print(f"✅ Encoded {result.records} value(s) into {len(ld_text.splitlines())} LD lines:\n")
    print(ld_text)

    print("Decoding LD back to JSON...")
    output = io.StringIO()
    result = transformer.ld_to_json(io.StringIO(ld_text), output)
    if result.success:
        decoded = json.loads(output.getvalue())
        print(f"✅ Output mode: {result.mode.value}")
        print(f"   Matches original: {decoded == sample_data}\n")

    # Named top-level containers are written as one JSON line each
    records = (
        "~~:* Two records\n"
        "~~:{first\n"
        "    ~~:#id\n"
        "    1\n"
        "    ~~:?active\n"
        "    true\n"
        "~~:}\n"
        "~~:{second\n"
        "    ~~:#id\n"
        "    2\n"
        "    ~~:?active\n"
        "    false\n"
        "~~:}\n"
    )
    print("Converting a record stream to JSON lines...")
    output = io.StringIO()
    result = transformer.ld_to_json(io.StringIO(records), output)
    print(f"✅ Output mode: {result.mode.value}")
    print(output.getvalue())

    # Malformed input raises from loads
    try:
        transformer.loads("~~:{\n~~:#count\nmany\n~~:}\n")
    except ConversionError as e:
        print(f"❌ Expected failure: {e}")


if __name__ == "__main__":
    main()
