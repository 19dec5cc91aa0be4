#!/usr/bin/env python3
"""
CLI tool for batch Pali script conversion.

Usage:
    python -m cli.transliterate sutta.txt --to thai
    python -m cli.transliterate ./cst4_xml/ --from devanagari --to roman --style iso
    python -m cli.transliterate bjt.json --to sinhala --no-numerals
    python -m cli.transliterate --list-engines

Features:
    - Single file or directory input
    - Source script auto-detection (files of unknown script are skipped)
    - Roman display style selection
    - Numerals toggle and Sanskrit reading of Roman input
    - CST4 stylesheet name fixing for XML files
    - Progress bar for batch processing
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import config
from core.errors import TransliterationError
from core.models import ConversionRequest, EngineType, RomanStyle, Script
from services.script_detector import detect_script
from services.transliterator import convert, fix_xsl_name

logger = logging.getLogger(__name__)

# Try to import rich for better output
try:
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
    from rich.table import Table
    RICH_AVAILABLE = True
    console = Console()
except ImportError:
    RICH_AVAILABLE = False
    console = None

SCRIPT_CHOICES = [s.name.lower() for s in Script if s is not Script.UNKNOWN]
ENCODINGS = {"utf-8": "utf-8", "utf-16le": "utf-16-le"}


def print_info(message: str):
    """Print info message."""
    if RICH_AVAILABLE:
        console.print(f"[blue]ℹ[/blue] {message}")
    else:
        print(f"INFO: {message}")


def print_success(message: str):
    """Print success message."""
    if RICH_AVAILABLE:
        console.print(f"[green]✓[/green] {message}")
    else:
        print(f"SUCCESS: {message}")


def print_error(message: str):
    """Print error message."""
    if RICH_AVAILABLE:
        console.print(f"[red]✗[/red] {message}")
    else:
        print(f"ERROR: {message}", file=sys.stderr)


def print_warning(message: str):
    """Print warning message."""
    if RICH_AVAILABLE:
        console.print(f"[yellow]⚠[/yellow] {message}")
    else:
        print(f"WARNING: {message}")


def output_path_for(source_file: Path, target: Script, output_dir: Path) -> Path:
    """Output file name: <stem>-<target ISO 15924 code><suffix>."""
    return output_dir / f"{source_file.stem}-{target.iso_code}{source_file.suffix}"


def transliterate_file(
    source_file: Path,
    target: Script,
    output_dir: Path,
    source: Optional[Script] = None,
    roman_style: Optional[RomanStyle] = None,
    include_numerals: bool = config.INCLUDE_NUMERALS,
    sanskrit_mode: bool = config.SANSKRIT_MODE,
    fix_xsl: Optional[bool] = None,
    encoding: str = "utf-8"
) -> dict:
    """
    Convert a single text file.

    Args:
        source_file: File to convert
        target: Target script
        output_dir: Directory for the converted file
        source: Source script (None: detect from the file's content)
        roman_style: Display style for Roman output
        include_numerals: Convert digits to the target script's numerals
        sanskrit_mode: Read Roman input as Sanskrit
        fix_xsl: Rewrite the CST4 stylesheet name (None: only for .xml files)
        encoding: Text encoding of input and output

    Returns:
        Dict describing the outcome: "output" on success, "skipped" or
        "error" otherwise
    """
    outcome = {"filename": source_file.name}
    try:
        text = source_file.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Failed to read {source_file.name}: {e}")
        outcome["error"] = str(e)
        return outcome

    detected = source or detect_script(text)
    outcome["source"] = detected.name.lower()
    if detected is Script.UNKNOWN:
        print_warning(f"Skipping {source_file.name}: script not recognized")
        logger.warning(f"Unknown script in {source_file}")
        outcome["skipped"] = "unknown script"
        return outcome
    if detected is target and target is not Script.ROMAN:
        print_warning(f"Skipping {source_file.name}: already in {target.display_name}")
        outcome["skipped"] = "same script"
        return outcome

    request = ConversionRequest(
        source=detected,
        target=target,
        roman_style=roman_style or RomanStyle.from_name(config.DEFAULT_ROMAN_STYLE),
        include_numerals=include_numerals,
        sanskrit_mode=sanskrit_mode,
    )
    try:
        result = convert(request, text)
    except TransliterationError as e:
        print_error(f"Failed to convert {source_file.name}: {e}")
        outcome["error"] = str(e)
        return outcome

    converted = result.text
    if fix_xsl or (fix_xsl is None and source_file.suffix.lower() == ".xml"):
        converted = fix_xsl_name(converted, detected, target)

    output_path = output_path_for(source_file, target, output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path.write_text(converted, encoding=encoding)
    print_success(f"Output written to: {output_path}")

    outcome["output"] = str(output_path)
    outcome["engines"] = result.engines
    return outcome


def collect_files(input_path: Path) -> List[Path]:
    """Files to convert: the file itself, or the supported files of a directory."""
    if input_path.is_file():
        return [input_path]
    files = []
    for ext in config.SUPPORTED_FORMATS:
        files.extend(input_path.glob(f"*{ext}"))
    return sorted(files)


def list_engines():
    """List the conversion engines."""
    if RICH_AVAILABLE:
        table = Table(title="Transliteration Engines")
        table.add_column("Code", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Source", style="green")
        table.add_column("Target", style="yellow")

        for engine in EngineType:
            table.add_row(
                engine.code,
                engine.display_name,
                engine.source.display_name,
                engine.target.display_name
            )

        console.print(table)
    else:
        print("\nTransliteration Engines:")
        print("-" * 60)
        for engine in EngineType:
            print(f"  {engine.code}: {engine.display_name}")
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pali Script Transliteration CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s sutta.txt --to thai                 # Detect the source script
  %(prog)s cst4/ --from devanagari --to roman  # Batch convert a directory
  %(prog)s mn1.txt --to roman --style iso      # ISO 15919 display style
  %(prog)s bjt.json --to sinhala --no-numerals
  %(prog)s --list-engines                      # List conversion engines
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Text file or directory to convert"
    )

    parser.add_argument(
        "--from", "-f",
        dest="source",
        choices=["auto"] + SCRIPT_CHOICES,
        default="auto",
        help="Source script (default: auto-detect per file)"
    )

    parser.add_argument(
        "--to", "-t",
        dest="target",
        choices=SCRIPT_CHOICES,
        help="Target script"
    )

    parser.add_argument(
        "--style", "-s",
        choices=[style.value for style in RomanStyle],
        default=config.DEFAULT_ROMAN_STYLE,
        help=f"Roman display style (default: {config.DEFAULT_ROMAN_STYLE})"
    )

    parser.add_argument(
        "--numerals",
        default=config.INCLUDE_NUMERALS,
        action=argparse.BooleanOptionalAction,
        help="Convert digits to the target script's numerals"
    )

    parser.add_argument(
        "--sanskrit",
        default=config.SANSKRIT_MODE,
        action=argparse.BooleanOptionalAction,
        help="Read Roman input as Sanskrit (ai/au diphthongs, vocalic ḷ)"
    )

    parser.add_argument(
        "--fix-xsl",
        default=None,
        action=argparse.BooleanOptionalAction,
        help="Rewrite the CST4 stylesheet name (default: .xml files only)"
    )

    parser.add_argument(
        "--encoding", "-e",
        choices=list(ENCODINGS),
        default="utf-8",
        help="Text encoding of input and output files (default: utf-8)"
    )

    parser.add_argument(
        "--output-dir", "-d",
        type=Path,
        default=None,
        help="Output directory (default: same as input)"
    )

    parser.add_argument(
        "--list-engines",
        action="store_true",
        help="List the conversion engines and exit"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Handle list engines
    if args.list_engines:
        list_engines()
        return 0

    # Require input and target if not listing engines
    if not args.input:
        parser.error("Input file or directory is required")
    if not args.target:
        parser.error("--to is required")

    input_path = Path(args.input)

    if not input_path.exists():
        print_error(f"Input not found: {input_path}")
        return 1

    files = collect_files(input_path)
    if not files:
        print_error(f"No text files found in: {input_path}")
        return 1
    if input_path.is_dir():
        print_info(f"Found {len(files)} text file(s)")

    source = None if args.source == "auto" else Script.from_name(args.source)
    target = Script.from_name(args.target)
    output_dir = args.output_dir or (input_path.parent if input_path.is_file() else input_path)
    options = dict(
        source=source,
        roman_style=RomanStyle.from_name(args.style),
        include_numerals=args.numerals,
        sanskrit_mode=args.sanskrit,
        fix_xsl=args.fix_xsl,
        encoding=ENCODINGS[args.encoding],
    )

    print_info(f"Target: {target.display_name}, Roman style: {args.style}, numerals: {args.numerals}")

    # Process files
    results = []

    if RICH_AVAILABLE and len(files) > 1:
        # Use progress bar for batch processing
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console
        ) as progress:
            task = progress.add_task("Converting...", total=len(files))

            for source_file in files:
                progress.update(task, description=f"Processing {source_file.name}")
                results.append(transliterate_file(source_file, target, output_dir, **options))
                progress.advance(task)
    else:
        for source_file in files:
            results.append(transliterate_file(source_file, target, output_dir, **options))

    # Summary
    converted = sum(1 for r in results if "output" in r)
    skipped = sum(1 for r in results if "skipped" in r)
    failed = sum(1 for r in results if "error" in r)

    print()
    if failed == 0:
        print_success(f"Completed: {converted} converted, {skipped} skipped")
    else:
        print_warning(f"Completed: {converted} converted, {skipped} skipped, {failed} failed")

    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
