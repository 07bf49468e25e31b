import shutil
from pathlib import Path


def resolve_cmd(cmd: str) -> str:
    """
    Resolve an executable name or path to an absolute path.

    Raises:
        FileNotFoundError: if the executable does not exist
    """
    p = Path(cmd)
    if "/" in cmd or "\\" in cmd:
        if p.is_file():
            return str(p.resolve())
        raise FileNotFoundError(f"Executable '{cmd}' not found.")
    found = shutil.which(cmd)
    if found:
        return found
    raise FileNotFoundError(
        f"Executable '{cmd}' not found. "
        f"Either provide a path (e.g. './platform-tools/adb') or ensure it's in PATH."
    )
