"""CLI for the 315 report services.

Usage examples:
- Build the JSON artifact:      python -m rca_report.pdf_reader.cli build
- Custom paths + Excel copy:    python -m rca_report.pdf_reader.cli build --input report.pdf --excel out/rcas.xlsx
- Parse an extracted text dump: python -m rca_report.pdf_reader.cli parse-text dump.txt
"""

import argparse
import json
import sys

from rca_report.config import INPUT_PDF, OUTPUT_JSON, resolve_path
from rca_report.shared import app_logger

from .errors import EmptyExtractionError, ExtractionFailedError, MissingInputError
from .logger import report_logger
from .services.build_service import build_report
from .services.report_parser import parse_report


def cmd_build(input_pdf: str, output_json: str, excel: str | None) -> int:
    input_path = resolve_path(input_pdf)
    output_path = resolve_path(output_json)
    excel_path = resolve_path(excel) if excel else None

    try:
        result = build_report(input_path, output_path, excel_output=excel_path)
    except MissingInputError as e:
        report_logger.error(f"❌ PDF not found: {e.path}")
        return 1
    except EmptyExtractionError:
        report_logger.error("❌ No line recognized in the 315 layout. Check the PDF.")
        return 1
    except ExtractionFailedError as e:
        app_logger.error(f"❌ {e}", exc_info=True)
        return 1
    except Exception as e:
        app_logger.error(f"❌ Build failed: {e}", exc_info=True)
        return 1

    print(f"✅ JSON written: {result.output_path}")
    print(f"   RCAs extracted: {result.row_count}")
    if excel_path:
        print(f"   Excel written: {excel_path}")
    return 0


def cmd_parse_text(text_file: str) -> int:
    path = resolve_path(text_file)
    if not path.is_file():
        report_logger.error(f"❌ Text file not found: {path}")
        return 1

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        report_logger.error(f"❌ Text file is not UTF-8: {path} ({e})")
        return 1

    rows = parse_report(text)
    print(json.dumps([row.model_dump() for row in rows], ensure_ascii=False, indent=2))
    return 0 if rows else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Winthor 315 report to JSON")
    sub = parser.add_subparsers(dest="cmd", required=True)

    build = sub.add_parser("build", help="Read the report PDF and write the JSON artifact")
    build.add_argument("--input", default=INPUT_PDF, help=f"Report PDF (default: {INPUT_PDF})")
    build.add_argument("--output", default=OUTPUT_JSON, help=f"JSON artifact (default: {OUTPUT_JSON})")
    build.add_argument("--excel", default=None, help="Also write the rows to this Excel file")

    parse_text = sub.add_parser("parse-text", help="Parse an already extracted text dump and print the rows")
    parse_text.add_argument("text_file")

    args = parser.parse_args(argv)

    if args.cmd == "build":
        return cmd_build(args.input, args.output, args.excel)
    elif args.cmd == "parse-text":
        return cmd_parse_text(args.text_file)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
