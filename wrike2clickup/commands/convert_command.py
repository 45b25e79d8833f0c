"""
Handles the logic for the 'convert' command.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..utils.config import parse_title_list
from ..utils.data_loading import load_export
from ..utils.logger import get_logger
from ..utils.writers import write_csv, write_json
from ..wrike_api.records import CSV_FIELDS, csv_rows
from ..wrike_api.transform import ConversionResult, transform_export

log = get_logger(__name__)


class OutputFormat(str, Enum):
    csv = "csv"
    json = "json"


@dataclass(frozen=True)
class ConvertOptions:
    users: Path
    tasks: Path
    folders: Path
    output: Path
    exclude_tags: Optional[str] = ""
    list_names: Optional[str] = ""
    output_format: OutputFormat = OutputFormat.csv


def handle_convert(options: ConvertOptions) -> ConversionResult:
    """
    Load the export, convert it and write the output file.

    Nothing is written unless the whole conversion succeeds.
    """
    log.info("Loading Wrike export from %s, %s and %s", options.users, options.tasks, options.folders)
    export = load_export(options.users, options.tasks, options.folders)

    result = transform_export(
        export,
        exclude_tags=parse_title_list(options.exclude_tags),
        list_names=parse_title_list(options.list_names),
    )

    if options.output_format == OutputFormat.json:
        write_json(options.output, result.as_document())
    else:
        write_csv(options.output, csv_rows(result.tasks), CSV_FIELDS)
    log.info("Wrote %s output to %s", options.output_format.value, options.output)
    return result
