#!/usr/bin/env python3
"""
Console Demo
Prints the Speaker, Venue and Event demonstration report.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.services.demo_service import build_demo_report  # noqa: E402
from src.utils.logging_config import configure_logging  # noqa: E402


def main():
    """Print every section of the report."""
    configure_logging()

    print("=== 🎯 EVENT MANAGEMENT SYSTEM ===\n")

    for section in build_demo_report():
        print(section.title.upper())
        print("=" * 60)
        for line in section.lines:
            status = "✅" if line.ok else "❌"
            print(f"   {status} {line.text}")
        print()

    print("=== 🎉 DEMO COMPLETE ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
