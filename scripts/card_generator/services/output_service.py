#------------------------------------------------------------
#                      output_service.py
#             Provides helpers to prepare the output
#                directory and write card files.

import os
from typing import List, Tuple

TEMP_SUFFIX = ".tmp"

# This function does make sure the output directory exists.
# It creates missing parent directories as well.
def ensure_output_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

# This function does save rendered card text to the given path.
# It writes UTF-8 content to overwrite the target file.
def save_card(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8") as file_handle:
        file_handle.write(content)

# This function does write a set of cards as one unit.
# Every card is staged beside its target first; targets are only replaced once all staged writes succeed.
def save_cards(cards: List[Tuple[str, str]]) -> List[str]:
    staged = []
    try:
        for path, content in cards:
            temp_path = path + TEMP_SUFFIX
            staged.append((temp_path, path))
            save_card(temp_path, content)
    except OSError:
        for temp_path, _ in staged:
            if os.path.exists(temp_path):
                os.remove(temp_path)
        raise

    for temp_path, path in staged:
        os.replace(temp_path, path)
    return [path for _, path in staged]
