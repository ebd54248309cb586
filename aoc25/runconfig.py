"""IDE run configurations stored in a workspace XML file."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

WORKSPACE_PATH = Path(".idea") / "workspace.xml"

_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _escape(value: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def _local(name: str) -> str:
    return name.rsplit("}", 1)[-1]


@dataclass
class RunConfiguration:
    """One run configuration entry of the IDE's run manager."""

    name: str = ""
    type: str = ""
    factory_name: str = ""
    module: str = ""
    working_directory: str = ""
    parameters: list[str] = field(default_factory=list)
    kind: str = ""
    package: str = ""
    directory: str = ""
    file_path: str = ""
    folder_name: str = ""
    method: int = 0

    def to_xml(self) -> str:
        """Return the ``<configuration>`` element as compact XML."""
        attributes = (
            ("name", self.name),
            ("type", self.type),
            ("factoryName", self.factory_name),
            ("folderName", self.folder_name),
        )
        children = (
            ("module", "name", self.module),
            ("working_directory", "value", self.working_directory),
            ("parameters", "value", " ".join(self.parameters)),
            ("kind", "value", self.kind),
            ("package", "value", self.package),
            ("directory", "value", self.directory),
            ("filePath", "value", self.file_path),
            ("method", "v", str(self.method)),
        )
        head = " ".join(f'{key}="{_escape(value)}"' for key, value in attributes)
        body = "".join(
            f'<{tag} {key}="{_escape(value)}"></{tag}>' for tag, key, value in children
        )
        return f"<configuration {head}>{body}</configuration>"


def has_run_configuration(name: str, path: str | Path = WORKSPACE_PATH) -> bool:
    """Tell whether the workspace holds a configuration with this name."""
    root = ET.parse(path).getroot()
    return any(
        _local(element.tag) == "configuration"
        and any(_local(k) == "name" and v == name for k, v in element.attrib.items())
        for element in root.iter()
    )


def add_run_configuration(
    config: RunConfiguration, path: str | Path = WORKSPACE_PATH
) -> bool:
    """Insert the configuration into the run manager and rewrite the file.

    Returns whether a run manager component was found.
    """
    tree = ET.parse(path)
    inserted = False
    for element in list(tree.getroot().iter()):
        if _local(element.tag) != "component":
            continue
        first_value = next(iter(element.attrib.values()), None)
        if first_value == "RunManager":
            element.insert(0, ET.fromstring(config.to_xml()))
            inserted = True
    ET.indent(tree, space="  ")
    tree.write(path, encoding="utf-8", xml_declaration=True)
    return inserted