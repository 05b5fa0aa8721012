"""
Example: pre-import check of a personnel export

Scans ``people.csv`` with the grammar in ``grammar.json``, validates it with
both backends and writes a JSON report next to this script. The sample file
contains an under-age employee on its last row, so validation fails there.
"""

from pathlib import Path

from rich.console import Console

from personnel_guard import check_file, configure_logging, get_logger, load_grammar_config

configure_logging(level="INFO", json_logs=False, include_timestamp=True)
logger = get_logger(__name__)

HERE = Path(__file__).parent


def main() -> None:
    grammar = load_grammar_config(HERE / "grammar.json")
    logger.info("grammar_loaded", **grammar.to_dict())

    console = Console()
    for backend in ("native", "pandas"):
        report = check_file(HERE / "people.csv", grammar, backend=backend)
        console.rule(f"{backend} backend")
        report.to_console(console, verbose=True)

    output = report.to_json(HERE / "people_report.json")
    logger.info("report_written", path=str(output), is_valid=report.is_valid)


if __name__ == "__main__":
    main()
