#!/usr/bin/env python3
"""
RFP Analyzer CLI - Command Line Interface
=========================================

Commands:
  rfp-analyzer analyze <file>              Analyze a PDF or DOCX RFP
  rfp-analyzer analyze <file> --json       Print the analysis as JSON
  rfp-analyzer analyze <file> -o out.json  Write the analysis to a file
"""

import argparse
import json
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .analysis import AnalysisError, AnalysisResult, DocumentAnalyzer
from .core.config import configure_logging, get_config, is_valid_log_level
from .parsing import DocumentParser, read_file

console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    error_console.print(f"Error: {escape(message)}", style="red", soft_wrap=True)


def render_result(result: AnalysisResult, file_name: str) -> None:
    """Render an analysis as rich tables"""
    meta = result.metadata
    console.print(Panel(
        f"{escape(result.summary)}\n\n"
        f"Author: {escape(meta.author)}   Created: {meta.creation_date.isoformat()[:19]}",
        title=f"RFP Analysis: {escape(file_name)}",
        box=box.ROUNDED,
    ))

    if result.sections:
        table = Table(title="Sections", box=box.ROUNDED)
        table.add_column("Page", style="cyan", justify="right")
        table.add_column("Level", justify="right")
        table.add_column("Title", style="bold")
        table.add_column("Lines", justify="right")
        for section in result.sections:
            table.add_row(
                str(section.start_page),
                str(section.level),
                escape(section.title),
                str(section.content.count("\n")),
            )
        console.print(table)

    if result.questions:
        table = Table(title="Questions", box=box.ROUNDED)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Question")
        for index, question in enumerate(result.questions, 1):
            table.add_row(str(index), escape(question))
        console.print(table)

    if result.requirements:
        criticality_styles = {
            "Mandatory": "red",
            "Recommended": "yellow",
            "Optional": "green",
            "Nice-to-Have": "dim",
        }
        table = Table(title="Requirements", box=box.ROUNDED)
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Description")
        table.add_column("Page", no_wrap=True)
        table.add_column("Criticality", no_wrap=True)
        table.add_column("Deadline")
        for req in result.requirements:
            style = criticality_styles.get(req.criticality.value, "white")
            table.add_row(
                req.id,
                escape(req.description),
                req.page_reference,
                f"[{style}]{req.criticality.value}[/{style}]",
                req.deadline or "-",
            )
        console.print(table)

    if result.insights:
        console.print(Panel(
            "\n".join(escape(str(insight)) for insight in result.insights),
            title="Key Insights",
            box=box.ROUNDED,
        ))


def cmd_analyze(args) -> int:
    """Analyze an RFP document"""
    path = Path(args.file)
    if not path.is_file():
        print_error(f"File not found: {args.file}")
        return 1

    try:
        content, file_type = read_file(str(path))
    except OSError as e:
        print_error(f"Cannot read {args.file}: {e}")
        return 1

    analyzer = DocumentAnalyzer(DocumentParser(get_config().reader))

    try:
        result = analyzer.analyze(content, file_type)
    except AnalysisError as e:
        print_error(str(e))
        return 1

    if args.json or args.output:
        payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        if args.output:
            try:
                Path(args.output).write_text(payload, encoding="utf-8")
            except OSError as e:
                print_error(f"Cannot write {args.output}: {e}")
                return 1
            console.print(f"✓ Analysis written to {args.output}", style="green")
        else:
            # Plain stdout so the JSON stays machine-readable
            sys.stdout.write(payload + "\n")
    else:
        render_result(result, path.name)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rfp-analyzer",
        description="RFP Analyzer - outline, questions and requirements from RFP documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rfp-analyzer analyze ./rfp.pdf
  rfp-analyzer analyze ./rfp.docx --json
  rfp-analyzer analyze ./rfp.pdf --output analysis.json
        """
    )
    parser.add_argument("--log-level", help="Logging level (default: RFP_ANALYZER_LOG_LEVEL or WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze an RFP document")
    analyze_parser.add_argument("file", help="Path to a .pdf or .docx file")
    analyze_parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    analyze_parser.add_argument("--output", "-o", help="Write JSON to this path")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        print_error(str(e))
        return 1

    issues = config.validate()
    if args.log_level and not is_valid_log_level(args.log_level):
        issues.append(f"Unknown log level: {args.log_level}")
    if issues:
        for issue in issues:
            print_error(issue)
        return 1

    configure_logging(args.log_level or config.logging.level, config.logging.format)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "analyze": cmd_analyze,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
