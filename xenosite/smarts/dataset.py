from pathlib import Path
from typing import Any, Union
import json
import logging

logger = logging.getLogger(__name__)


class Dataset:
    """
    Molecule dataset in the QCArchive-style JSON layout::

        {"entries": {"<key>": [{"cmiles": "<mapped SMILES>", ...}, ...], ...}}

    Only the ``cmiles`` field of each record is used.
    """

    def __init__(self, entries: dict[str, list[dict[str, Any]]]):
        self.entries = entries

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Dataset":
        with open(path) as f:
            data = json.load(f)

        try:
            entries = data["entries"]
        except (KeyError, TypeError):
            raise ValueError(f"{path} has no 'entries' mapping") from None

        logger.debug(f"loaded {len(entries)} entries from {path}")
        return cls(entries)

    def __len__(self) -> int:
        return sum(len(records) for records in self.entries.values())

    def to_smiles(self) -> list[str]:
        """Canonical SMILES of every record, first occurrence order, without duplicates."""
        out = []
        seen = set()
        for records in self.entries.values():
            for record in records:
                smi = record["cmiles"]
                if smi not in seen:
                    seen.add(smi)
                    out.append(smi)
        return out
