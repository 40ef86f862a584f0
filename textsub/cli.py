"""Command-Line Interface handler for TextSub."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config_loader import ConfigLoader
from .log_setup import setup_logging
from .exporter import LocalFileExporter
from .export_dialog import ExportDialog, prompt_duration
from .subtitle_generator import SubtitleGenerator
from .line_filter import has_blank_lines
from .exceptions import TextSubError, ConfigurationError

logger = logging.getLogger(__name__) # Get logger for this module

DEFAULT_CONFIG_PATH = "config.yaml"

class CLIHandler:
    """Parses arguments and orchestrates the TextSub process."""

    def __init__(self, input_func=input):
        self.parser = self._create_parser()
        self.input_func = input_func

    def _create_parser(self) -> argparse.ArgumentParser:
        """Creates the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            description="TextSub: Turn the text of a document into a timed SRT subtitle file.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter # Show defaults in help
        )
        parser.add_argument(
            "-i", "--input",
            required=True,
            help="Path to the input document (.docx or .txt)."
        )
        parser.add_argument(
            "-o", "--output-dir",
            required=True,
            help="Directory to save the generated subtitle file."
        )
        parser.add_argument(
            "-c", "--config",
            default=DEFAULT_CONFIG_PATH,
            help="Path to the configuration YAML file. Built-in defaults are used if the default file is missing."
        )
        parser.add_argument(
            "-d", "--duration",
            type=float,
            default=None, # Default taken from config file
            help="Seconds each line stays on screen (1 to 10, step 0.5)."
        )
        parser.add_argument(
            "--normalize",
            action="store_true",
            default=None,
            help="Replace punctuation with line breaks before export."
        )
        parser.add_argument(
            "--interactive",
            action="store_true",
            help="Ask for the duration before exporting."
        )
        parser.add_argument(
            "--log-level",
            default="INFO",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Set the logging level for console and file output."
        )
        return parser

    def _load_config(self, config_path: str) -> dict:
        try:
            return ConfigLoader().load_config(config_path)
        except FileNotFoundError:
            if config_path == DEFAULT_CONFIG_PATH:
                logger.warning(f"No {DEFAULT_CONFIG_PATH} found, using built-in defaults.")
                return {}
            raise

    def _ask_duration(self, default: float) -> Optional[float]:
        """Runs the export dialog on the terminal. Returns None if the user cancels."""
        chosen = []
        dialog = ExportDialog(on_export=chosen.append, default_duration=default)
        dialog.open()
        while dialog.is_open:
            try:
                raw = self.input_func(f"Seconds per line [1-10, default {default:g}, 'q' to cancel]: ")
            except EOFError:
                # Closed stdin cancels like 'q'
                raw = 'q'
            if raw.strip().lower() == 'q':
                dialog.cancel()
                return None
            try:
                dialog.confirm(prompt_duration(raw, default=default))
            except ValueError as e:
                print(f"Invalid duration: {e}")
        return chosen[0]

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Parses arguments, sets up logging, loads config, and runs the generator."""
        args = self.parser.parse_args(argv)

        log_level = getattr(logging, args.log_level.upper(), logging.INFO)
        setup_logging(log_level=log_level, log_dir='logs', log_file='textsub_init.log')

        # --- Load Configuration ---
        try:
            config = self._load_config(args.config)
        except (ConfigurationError, FileNotFoundError) as e:
            logger.critical(f"Failed to load configuration from {args.config}: {e}")
            sys.exit(1)

        log_dir = config.get('log_dir', 'logs')
        log_file = config.get('log_file', 'textsub.log')
        setup_logging(log_level=log_level, log_dir=log_dir, log_file=log_file)

        # --- Apply CLI Overrides ---
        if args.duration is not None:
            logger.info(f"Overriding duration from config with CLI argument: {args.duration}")
            config['duration'] = args.duration
        if args.normalize:
            config['normalize_punctuation'] = True

        if not os.path.isfile(args.input):
            logger.critical(f"Input document not found or is not a file: {args.input}")
            sys.exit(1)

        try:
            exporter = LocalFileExporter(args.output_dir)
            generator = SubtitleGenerator(config=config, exporter=exporter)

            text = generator.load_text(args.input)
            if generator.config['normalize_punctuation']:
                text = generator.normalize(text)
            if has_blank_lines(text):
                logger.info("Blank lines found; they will be left out of the subtitles.")

            duration = generator.config['duration']
            if args.interactive:
                duration = self._ask_duration(duration)
                if duration is None:
                    logger.info("Export cancelled by user.")
                    sys.exit(0)

            generator.export(text, duration)
            logger.info(f"Subtitles saved to: {exporter.last_path}")
            sys.exit(0)

        except TextSubError as e:
             logger.error(f"A TextSub error occurred: {e}")
             sys.exit(1)
        except KeyboardInterrupt:
             logger.warning("Process interrupted by user (Ctrl+C). Exiting.")
             sys.exit(1)
        except Exception as e:
             logger.critical(f"An unexpected critical error occurred at the top level: {e}", exc_info=True)
             sys.exit(2) # Use a different exit code for unexpected crashes


def main(argv: Optional[List[str]] = None) -> None:
    CLIHandler().run(argv)
