"""Command-line interface for splitting lyrics into display lines."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from lyricsplit.config.loader import load_config, ConfigLoadError
from lyricsplit.config.schema import SplitterConfig
from lyricsplit.core.util import safe_json
from lyricsplit.runtime.highlight import highlight_segments
from lyricsplit.segmenters.lyrics import LyricSegmenter


class ConsoleLogger:
    """Console logger writing to stderr."""
    
    def info(self, msg: str, **kv):
        self._write("INFO", msg, kv)
        
    def warn(self, msg: str, **kv):
        self._write("WARN", msg, kv)
        
    def error(self, msg: str, **kv):
        self._write("ERROR", msg, kv)
    
    @staticmethod
    def _write(level: str, msg: str, kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=sys.stderr)


def _read_text(source: Optional[str]) -> str:
    if not source or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _build_segmenter(args) -> LyricSegmenter:
    config = load_config(args.config) if args.config else SplitterConfig()
    logger = ConsoleLogger() if getattr(args, "verbose", False) else None
    return LyricSegmenter(config, logger=logger)


def split_command(args):
    """Split a lyrics file (or stdin) into display lines."""
    try:
        segmenter = _build_segmenter(args)
        text = _read_text(args.lyrics_file)
        result = segmenter.run(text, args.target_length)
        
        if args.json:
            payload = {"lines": result.lines}
            if args.stats:
                payload["summary"] = result.length_summary
                payload["hard_cuts"] = result.hard_cuts
            print(safe_json(payload))
            return 0
        
        for line in result.lines:
            print(line)
            
        if args.stats:
            summary = result.length_summary
            print(f"\n{result.line_count} lines from {result.paragraphs} paragraphs "
                  f"(target {result.target_length})", file=sys.stderr)
            print(f"   Length: mean={summary['mean']:.1f} min={summary['min']:.0f} "
                  f"max={summary['max']:.0f}", file=sys.stderr)
            print(f"   Hard cuts: {result.hard_cuts}", file=sys.stderr)
        
        return 0
        
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}")
        return 1
    except (OSError, ValueError) as e:
        print(f"❌ Error: {e}")
        return 1


def highlight_command(args):
    """Show where one output line sits in the raw lyrics."""
    try:
        segmenter = _build_segmenter(args)
        text = _read_text(args.lyrics_file)
        lines = segmenter.split(text, args.target_length)
        
        if not 0 <= args.line < len(lines):
            print(f"Error: line index {args.line} out of range (0..{len(lines) - 1})")
            return 1
        
        rendered = []
        for seg in highlight_segments(text, lines, args.line):
            rendered.append(f"[[{seg.text}]]" if seg.highlight else seg.text)
        print("".join(rendered))
        return 0
        
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}")
        return 1
    except (OSError, ValueError) as e:
        print(f"❌ Error: {e}")
        return 1


def validate_config_command(args):
    """Validate a splitter configuration file."""
    try:
        config_path = Path(args.config_file)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1
        
        print(f"Validating config: {config_path}")
        config = load_config(config_path)
        
        tol = config.tolerance
        print("✅ Config validation successful!")
        print(f"   Version: {config.version}")
        print(f"   Target length: {config.target_length}")
        print(f"   Tolerance: max_ratio={tol.max_ratio}, max_slack={tol.max_slack}, "
              f"reflow_ratio={tol.reflow_ratio}")
        print(f"   Abbreviations: {len(config.abbreviations)}")
        
        if args.verbose:
            print(f"\nAbbreviations: {', '.join(config.abbreviations) or 'none'}")
            print(f"Mask initials: {config.mask_initials}")
        
        return 0
        
    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1


def info_command(args):
    """Display version and system information."""
    print("lyricsplit CLI")
    print("=" * 50)
    
    try:
        import importlib.metadata
        version = importlib.metadata.version("lyricsplit")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")
    
    print(f"Python: {sys.version.split()[0]}")
    
    print("\nOptional dependencies:")
    
    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")
    
    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lyricsplit",
        description="Split song lyrics into display lines"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split a lyrics file into display lines"
    )
    split_parser.add_argument(
        "lyrics_file",
        nargs="?",
        default="-",
        help="Path to the lyrics text file (default: stdin)"
    )
    split_parser.add_argument(
        "-t", "--target-length",
        type=int,
        help="Preferred line length (default: from config, 14)"
    )
    split_parser.add_argument(
        "-c", "--config",
        help="Path to a YAML splitter config"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the lines as JSON"
    )
    split_parser.add_argument(
        "--stats",
        action="store_true",
        help="Report line length statistics"
    )
    split_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log segmentation events to stderr"
    )
    
    # Highlight command
    highlight_parser = subparsers.add_parser(
        "highlight",
        help="Mark one output line inside the raw lyrics"
    )
    highlight_parser.add_argument(
        "lyrics_file",
        help="Path to the lyrics text file"
    )
    highlight_parser.add_argument(
        "-l", "--line",
        type=int,
        required=True,
        help="Index of the output line to highlight"
    )
    highlight_parser.add_argument(
        "-t", "--target-length",
        type=int,
        help="Preferred line length (default: from config, 14)"
    )
    highlight_parser.add_argument(
        "-c", "--config",
        help="Path to a YAML splitter config"
    )
    
    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a splitter config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )
    
    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )
    
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    if args.command == "split":
        return split_command(args)
    elif args.command == "highlight":
        return highlight_command(args)
    elif args.command == "validate":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
