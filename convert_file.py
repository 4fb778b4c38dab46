"""
Convert a local document to text (no backend needed).
Run from project folder: python convert_file.py <path> [mime-type]
"""
import asyncio
import mimetypes
import sys
from pathlib import Path

from dotenv import load_dotenv

from docextract.domain.errors import ExtractionError, UnsupportedDocumentTypeError

_USAGE = "usage: python convert_file.py <path> [mime-type]"

mimetypes.add_type("text/markdown", ".md")
mimetypes.add_type(
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document", ".docx"
)


async def convert(path: Path, mime_type: str) -> str:
    from docextract.dependencies import get_conversion_service, get_docx_parser, get_pdf_parser

    service = get_conversion_service(get_pdf_parser(), get_docx_parser())
    return await service.convert_to_markdown(path.read_bytes(), mime_type, path.name)


def main(argv: list[str]) -> int:
    if len(argv) not in (2, 3):
        print(_USAGE, file=sys.stderr)
        return 2

    path = Path(argv[1])
    if not path.is_file():
        print(f"No such file: {path}", file=sys.stderr)
        return 2

    mime_type = argv[2] if len(argv) == 3 else (mimetypes.guess_type(path.name)[0] or "")

    try:
        text = asyncio.run(convert(path, mime_type))
    except (ExtractionError, UnsupportedDocumentTypeError) as e:
        print(f"FAIL - {path.name}: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    load_dotenv()
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.exit(main(sys.argv))
