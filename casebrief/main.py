import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

from casebrief.config.settings import Settings
from casebrief.exceptions import AnalysisError
from casebrief.flow.controller import AnalysisFlowController, build_controller
from casebrief.flow.session import AnalysisSession, AnalysisStatus
from casebrief.logging.logger import Log
from casebrief.upload.file_loader import FileLoader


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="casebrief",
        description="Analyze a family-law document and print the report as JSON.",
    )
    parser.add_argument("path", type=Path, help="PDF, JPEG, PNG or WEBP document")
    parser.add_argument("--media-type", help="Override the media type guessed from the name")
    parser.add_argument("--jurisdiction", help="Jurisdiction context for the prompt")
    return parser.parse_args(argv)


async def analyze_file(
    controller: AnalysisFlowController,
    loader: FileLoader,
    path: Path,
    *,
    media_type: str | None = None,
    jurisdiction: str | None = None,
) -> AnalysisSession:
    """Load a file, run one analysis and return the final session."""
    candidate = loader.load(path, media_type)
    controller.submit(candidate, jurisdiction=jurisdiction)
    return await controller.wait()


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> controller -> one analysis -> JSON report."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    controller = build_controller(settings)
    loader = FileLoader(max_bytes=settings.max_upload_bytes)
    try:
        session = asyncio.run(
            analyze_file(
                controller,
                loader,
                args.path,
                media_type=args.media_type,
                jurisdiction=args.jurisdiction,
            )
        )
    except AnalysisError as exc:
        Log.error(f"Upload rejected ({exc.kind}): {exc.user_message}")
        return 1

    if session.status is not AnalysisStatus.COMPLETE or session.report is None:
        Log.error(f"Analysis failed ({session.error_kind}): {session.error_reason}")
        return 1
    print(json.dumps(asdict(session.report), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
