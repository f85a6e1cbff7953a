"""
Legal document generator.

Reads the answers collected for one of the bundled document templates from a
JSON file, lays the document out onto pages and writes a PDF named
``<document_type>_<YYYYMMDD_HHmmss>.pdf``. With ``--json`` the page layout is
printed instead of writing a file.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from dotenv import load_dotenv

from lexform.documents import DocumentError, generate_document, render_document, resolve_template
from lexform.templates import available_templates


def read_answers(source: Path) -> Dict[str, Any]:
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Answers file is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise SystemExit("Answers file must contain a JSON object of field values.")
    return payload


def format_template_list() -> str:
    lines = []
    for key in available_templates():
        template = resolve_template(key)
        lines.append(f"{key}: {template.description}")
    return "\n".join(lines)


def _configure_logging() -> None:
    level = os.getenv("LEXFORM_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))


def main(argv: Optional[Sequence[str]] = None) -> None:
    load_dotenv()
    _configure_logging()

    parser = argparse.ArgumentParser(description="Render a legal document template from collected answers.")
    parser.add_argument("document_type", nargs="?", help="Template key, e.g. loan_agreement or nda")
    parser.add_argument("answers", nargs="?", type=Path, help="Path to a JSON file of answers")
    parser.add_argument("--list", dest="list_templates", action="store_true", help="List available templates")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print the page layout as JSON")
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        type=Path,
        default=None,
        help="Directory for generated files (default: $LEXFORM_OUTPUT_DIR or ./output)",
    )
    args = parser.parse_args(argv)

    if args.list_templates:
        print(format_template_list())
        return

    if not args.document_type or args.answers is None:
        parser.error("document_type and answers are required unless --list is given")

    if not args.answers.exists():
        raise SystemExit(f"Answers file not found: {args.answers}")

    answers = read_answers(args.answers)

    try:
        if args.as_json:
            pages = render_document(args.document_type, answers)
            print(json.dumps([page.to_dict() for page in pages], indent=2))
            return
        output_path = generate_document(args.document_type, answers, output_dir=args.output_dir)
    except DocumentError as exc:
        raise SystemExit(f"Failed to generate document: {exc}") from exc

    print(output_path)


if __name__ == "__main__":
    main()
