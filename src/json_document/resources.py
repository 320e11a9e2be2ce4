"""Read bundled text resources such as schemas and mapping specs.

Resources are looked up inside an importable package via
``importlib.resources`` or, without a package, on the filesystem::

    schema = read_resource("schemas/order.json", package="myapp")
    validator = JsonValidator.create(schema)
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path

__all__ = ["read_resource"]


def read_resource(name: str, package: str | None = None) -> str:
    """Return the UTF-8 text of resource ``name``.

    Args:
        name:    Resource path.  Inside a package a leading ``/`` is ignored
                 and ``/`` separates sub-directories.
        package: Dotted name of the package holding the resource, or None to
                 read ``name`` as a filesystem path.

    Raises:
        FileNotFoundError: If the resource does not exist.
    """
    if package is None:
        return Path(name).read_text(encoding="utf-8")

    resource = resources.files(package)
    for part in name.lstrip("/").split("/"):
        resource = resource.joinpath(part)
    if not resource.is_file():
        raise FileNotFoundError(f"Resource {name!r} not found in package {package!r}")
    return resource.read_text(encoding="utf-8")
