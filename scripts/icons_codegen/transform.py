"""esbuild invocation and output file writing."""

import subprocess
from pathlib import Path
from typing import Callable, Optional

from .catalog import UTF8
from .errors import TransformError, WriteError

ESBUILD_PATH = "esbuild"
ESBUILD_TARGET = "node14"

Transform = Callable[..., str]


def esbuild_transform(
    source: str,
    *,
    format: Optional[str] = None,
    target: Optional[str] = ESBUILD_TARGET,
    esbuild_path: str = ESBUILD_PATH,
) -> str:
    """
    Minify JavaScript with the esbuild CLI, reading the source from stdin.

    Args:
        source: The JavaScript source
        format: Output module format (e.g. "cjs"), None keeps the input's
        target: Language target, None for esbuild's default
        esbuild_path: The esbuild executable

    Returns:
        The transformed code

    Raises:
        TransformError: If esbuild cannot be run or rejects the source
    """
    command = [esbuild_path, "--minify", "--loader=js", "--log-level=error"]
    if format:
        command.append(f"--format={format}")
    if target:
        command.append(f"--target={target}")

    try:
        result = subprocess.run(
            command,
            input=source,
            capture_output=True,
            check=True,
            encoding=UTF8,
        )
    except FileNotFoundError as exc:
        raise TransformError(f"esbuild executable not found: {esbuild_path}") from exc
    except subprocess.CalledProcessError as exc:
        raise TransformError(
            f"esbuild failed with exit code {exc.returncode}:\n{exc.stderr}"
        ) from exc

    return result.stdout


def write_text(filepath: Path, text: str) -> None:
    try:
        with open(filepath, "w", encoding=UTF8) as f:
            f.write(text)
    except OSError as exc:
        raise WriteError(f"could not write {filepath}: {exc}") from exc


def write_js(filepath: Path, raw_javascript: str, transform: Transform = esbuild_transform) -> None:
    """Minify generated JavaScript and write it out."""
    write_text(filepath, transform(raw_javascript, target=ESBUILD_TARGET))


def write_ts(filepath: Path, raw_typescript: str) -> None:
    """Write type declarations as they are."""
    write_text(filepath, raw_typescript)
