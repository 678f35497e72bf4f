"""
Session Results
===============

Saves finished sessions to JSON so scores can be compared across runs.

Usage:
    from click_accuracy.game_core import ClickGame, HeadlessSurface, save_session_result

    game = ClickGame(HeadlessSurface(), seed=42)
    game.start()
    game.scheduler.advance(10000)

    save_session_result(game.last_result, directory="results/")
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from click_accuracy.game_core.game import SessionResult

RESULTS_FORMAT_VERSION = 1


def generate_results_filename(
    prefix: str = "session",
    seed: Optional[int] = None,
    directory: Optional[Union[str, Path]] = None
) -> Path:
    """
    Generate a timestamped results filename.

    Format: {prefix}_{YYYYMMDD_HHMMSS}[_s{seed}].json

    Args:
        prefix: Leading part of the name.
        seed: Random seed (optional, included if provided).
        directory: Directory for the file. Defaults to current directory.

    Returns:
        Path object for the results file.

    Example:
        >>> generate_results_filename("session", seed=42)
        PosixPath('session_20260119_143052_s42.json')
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    name = f"{prefix}_{timestamp}"
    if seed is not None:
        name += f"_s{seed}"
    name += ".json"

    if directory is not None:
        return Path(directory) / name
    return Path(name)


def _unique_path(path: Path) -> Path:
    """Append _2, _3, ... to the stem until the name is free."""
    candidate = path
    counter = 2
    while candidate.exists():
        candidate = path.with_name(f"{path.stem}_{counter}{path.suffix}")
        counter += 1
    return candidate


def build_results_data(result: SessionResult) -> Dict[str, Any]:
    """Serializable dict for a finished session."""
    data = {
        "version": RESULTS_FORMAT_VERSION,
        "timestamp": datetime.now().isoformat(timespec="seconds"),
    }
    data.update(result.to_dict())
    return data


def save_session_result(
    result: SessionResult,
    path: Optional[Union[str, Path]] = None,
    overwrite: bool = False,
    directory: Optional[Union[str, Path]] = None,
    verbose: bool = True
) -> Path:
    """
    Save a session result to a JSON file.

    Args:
        result: The finished session.
        path: Path to save to. If None, auto-generates a timestamped name.
        overwrite: If True, overwrite existing file.
        directory: Directory for auto-generated filename (only used if path is None).
        verbose: Print a short summary after saving.

    Returns:
        Path where the results were saved.

    Raises:
        FileExistsError: If an explicit path exists and overwrite is False.
            Auto-generated names get a counter suffix instead.
    """
    if path is None:
        path = generate_results_filename(seed=result.seed, directory=directory)
        path = _unique_path(path)
    else:
        path = Path(path)

    if path.exists() and not overwrite:
        raise FileExistsError(f"Results file already exists: {path}")

    # Create parent directories if needed
    path.parent.mkdir(parents=True, exist_ok=True)

    data = build_results_data(result)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    if verbose:
        stats = data["statistics"]
        print(f"Results saved: {path}")
        print(f"  Hits: {stats['hits']}/{stats['targets']} ({stats['target_accuracy']}%)")
        print(f"  Clicks: {stats['clicks']} ({stats['click_accuracy']}%)")

    return path


def load_session_result(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a results file written by save_session_result.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a results file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Results file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if "statistics" not in data:
        raise ValueError(f"Not a session results file: {path}")
    return data
