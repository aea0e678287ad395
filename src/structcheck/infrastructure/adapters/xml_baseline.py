"""XML baseline repository adapter.

Implements BaselineRepositoryPort::

    <?xml version="1.0" ?>
    <StructuralBaseline>
      <CurrentIssues>
        <ID>ForbiddenImport$Screen$3$com.example.ui$com.example.data</ID>
      </CurrentIssues>
    </StructuralBaseline>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from structcheck.domain.exceptions.baseline import BaselineIOError
from structcheck.domain.model.baseline import Baseline
from structcheck.domain.ports.baseline_repository import BaselineRepositoryPort

ROOT_TAG = "StructuralBaseline"
ISSUES_TAG = "CurrentIssues"
ID_TAG = "ID"


def parse_baseline(text: str, path: Path) -> Baseline:
    """Parse baseline XML text.

    Raises:
        BaselineIOError: Malformed XML or unexpected root element
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise BaselineIOError(path, f"malformed XML: {e}") from e

    if root.tag != ROOT_TAG:
        raise BaselineIOError(path, f"expected <{ROOT_TAG}> root, got <{root.tag}>")

    entries: list[str] = []
    for element in root.iterfind(f"{ISSUES_TAG}/{ID_TAG}"):
        identity = (element.text or "").strip()
        if identity:
            entries.append(identity)
    return Baseline(entries=tuple(dict.fromkeys(entries)))


def render_baseline(baseline: Baseline) -> str:
    """Render baseline as XML document text (trailing newline included)."""
    root = ET.Element(ROOT_TAG)
    issues = ET.SubElement(root, ISSUES_TAG)
    for identity in baseline.entries:
        ET.SubElement(issues, ID_TAG).text = identity
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" ?>\n{body}\n'


class XmlBaselineRepository(BaselineRepositoryPort):
    """Reads and writes baseline XML files. Stateless."""

    def load(self, path: Path) -> Baseline:
        """Read baseline; absent file is an empty baseline.

        Raises:
            BaselineIOError: If file exists but cannot be read or parsed
        """
        if not path.exists():
            return Baseline.empty()
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise BaselineIOError(path, f"cannot read: {e}") from e
        return parse_baseline(text, path)

    def save(self, path: Path, baseline: Baseline) -> None:
        """Replace baseline file, creating parent directories.

        Raises:
            BaselineIOError: If file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(render_baseline(baseline), encoding="utf-8")
        except OSError as e:
            raise BaselineIOError(path, f"cannot write: {e}") from e
