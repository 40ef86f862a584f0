#!/usr/bin/env python3
"""
TextSub Batch Processing Entry Point

Converts every .docx and .txt document in a directory, smallest first,
into an SRT file of the same name under a Subs subfolder.
"""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional, Tuple

# Progress bar library
from tqdm import tqdm

from textsub.config_loader import ConfigLoader
from textsub.log_setup import setup_logging
from textsub.exporter import LocalFileExporter
from textsub.subtitle_generator import SubtitleGenerator
from textsub.exceptions import TextSubError, ConfigurationError, FileSystemError
from textsub.utils import ensure_dir_exists

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = ('.docx', '.txt')

def find_and_sort_documents(input_dir: str) -> List[Tuple[str, int]]:
    """
    Finds all supported documents in the input directory and sorts them by size.

    Args:
        input_dir: The directory to search for documents.

    Returns:
        A list of (filepath, filesize) tuples, smallest file first.

    Raises:
        FileNotFoundError: If the input directory doesn't exist.
        ValueError: If the input path is not a directory.
    """
    if not os.path.exists(input_dir):
        raise FileNotFoundError(f"Input directory not found: {input_dir}")
    if not os.path.isdir(input_dir):
        raise ValueError(f"Input path is not a directory: {input_dir}")

    documents = []
    logger.info(f"Scanning directory for documents: {input_dir}")
    for filename in os.listdir(input_dir):
        # Word lock files (~$name.docx) are not documents
        if filename.startswith('~$') or not filename.lower().endswith(DOCUMENT_EXTENSIONS):
            continue
        filepath = os.path.join(input_dir, filename)
        try:
            if os.path.isfile(filepath):
                documents.append((filepath, os.path.getsize(filepath)))
        except OSError as e:
            logger.warning(f"Could not access file {filepath}: {e}. Skipping.")

    documents.sort(key=lambda item: item[1])
    logger.info(f"Found {len(documents)} documents. Sorted by size (smallest first).")
    return documents


def run_batch_processing(argv: Optional[List[str]] = None) -> None:
    """Parses arguments, sets up, and runs the batch subtitle generation."""
    parser = argparse.ArgumentParser(
        description="TextSub Batch: Generate SRT subtitles for every document in a directory.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "-i", "--input-dir",
        required=True,
        help="Directory containing the input .docx/.txt documents."
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to the configuration YAML file. Built-in defaults are used if omitted."
    )
    parser.add_argument(
        "-d", "--duration",
        type=float,
        default=None,
        help="Override the seconds-per-line duration from the config file."
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Replace punctuation with line breaks before export."
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level for console and file output."
    )

    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    setup_logging(log_level=log_level, log_dir='logs', log_file='textsub_batch_init.log')

    # --- Load Configuration ---
    config = {}
    if args.config:
        try:
            config = ConfigLoader().load_config(args.config)
        except (ConfigurationError, FileNotFoundError) as e:
            logger.critical(f"Failed to load configuration: {e}")
            sys.exit(1)

    setup_logging(
        log_level=log_level,
        log_dir=config.get('log_dir', 'logs'),
        log_file=config.get('log_file', 'textsub_batch.log')
    )

    if args.duration is not None:
        logger.info(f"Overriding duration from config with CLI argument: {args.duration}")
        config['duration'] = args.duration
    if args.normalize:
        config['normalize_punctuation'] = True

    try:
        documents = find_and_sort_documents(args.input_dir)
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"Input directory error: {e}")
        sys.exit(1)
    if not documents:
        logger.warning(f"No documents found in {args.input_dir}. Exiting.")
        sys.exit(0)

    subs_dir = os.path.join(args.input_dir, "Subs")
    try:
        ensure_dir_exists(subs_dir)
    except FileSystemError as e:
        logger.critical(f"Could not create output directory: {e}")
        sys.exit(1)

    generator = SubtitleGenerator(config=config, exporter=LocalFileExporter(subs_dir))

    total_files = len(documents)
    files_processed = 0
    files_failed = 0
    batch_start_time = time.time()
    logger.info(f"--- Starting Batch Subtitle Generation for {total_files} files ---")

    with tqdm(total=total_files, unit="doc", desc="Starting Batch") as pbar:
        for document_path, _ in documents:
            document_filename = os.path.basename(document_path)
            pbar.set_description(f"Processing: {document_filename[:30]}")
            srt_filename = f"{os.path.splitext(document_filename)[0]}.srt"

            try:
                text, extraction_error = generator.try_load_text(document_path)
                if extraction_error is not None:
                    # Unreadable documents are reported, not exported
                    logger.error(f"Could not extract text from {document_filename}: {extraction_error}")
                    files_failed += 1
                    continue
                if generator.config['normalize_punctuation']:
                    text = generator.normalize(text)
                generator.export(text, filename=srt_filename)
                files_processed += 1
            except TextSubError as e:
                logger.error(f"TextSub failed for document '{document_filename}': {e}")
                files_failed += 1
            except KeyboardInterrupt:
                logger.warning("Batch process interrupted by user (Ctrl+C). Exiting.")
                sys.exit(1)
            except Exception as e:
                logger.error(f"An unexpected error occurred processing '{document_filename}': {e}", exc_info=True)
                files_failed += 1
            finally:
                pbar.update(1)

    logger.info(f"--- Batch Subtitle Generation Finished ---")
    logger.info(f"Total time: {time.time() - batch_start_time:.2f} seconds")
    logger.info(f"Successfully processed: {files_processed}/{total_files} documents")
    logger.info(f"Failed: {files_failed}/{total_files} documents")

    sys.exit(1 if files_failed > 0 else 0)


if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("TextSub requires Python 3.8 or later.\n")
        sys.exit(1)

    run_batch_processing()
