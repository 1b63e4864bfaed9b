from xenosite.smarts import Smarts, Dataset, SmartsError
from xenosite.smarts.chem import rdkit_warnings, smiles_to_mol, to_smarts, bond_mismatches

import rich.progress
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler
import typer
from typing import Optional, Any
import logging
from pathlib import Path
import pandas as pd


logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(rich_tracebacks=True, tracebacks_suppress=[typer], markup=True)
    ],
)

logger = logging.getLogger("xenosite.smarts")
logger.setLevel(logging.INFO)

console = Console()

app = typer.Typer(
    name="smarts",
    help="Read SMARTS patterns into atom and bond tables.",
)


def _set_verbosity(verbose: int):
    if verbose:
        logger.setLevel(logging.DEBUG)


@app.command()
def parse(
    pattern: str = typer.Argument(..., help="SMARTS pattern, e.g. '[#6H3:1]-[#8H:2]'."),
    smiles: bool = typer.Option(
        False, "--smiles", help="Treat PATTERN as SMILES and convert it with RDKit first."
    ),
    strict: bool = typer.Option(False, help="Fail on unclosed ring labels."),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True),
):
    """Print the atoms and bonds of one pattern."""
    _set_verbosity(verbose)

    try:
        result = Smarts.from_smiles(pattern, strict) if smiles else Smarts.parse(pattern, strict)
    except (SmartsError, ValueError) as e:
        logger.error(f"[bold red]{e}[/bold red]")
        raise typer.Exit(code=1)

    atoms = Table(title=result.pattern)
    for col in ["index", "atomic number", "H", "charge", "chiral"]:
        atoms.add_column(col)
    for a in result.atoms:
        atoms.add_row(
            str(a.mol_index), str(a.atomic_number), str(a.n_hydrogens), str(a.charge), a.chiral.name
        )

    bonds = Table()
    for col in ["atom1", "atom2", "order"]:
        bonds.add_column(col)
    for b in result.bonds:
        bonds.add_row(str(b.atom1), str(b.atom2), b.order.name)

    console.print(atoms)
    console.print(bonds)


def one_pattern(smiles: str, check: bool = True, strict: bool = False) -> dict[str, Any]:
    """Convert and parse one SMILES. Failures are logged and recorded, never raised."""
    row: dict[str, Any] = dict(smiles=smiles, smarts=None, n_atoms=None, n_bonds=None, error=None)

    try:
        mol = smiles_to_mol(smiles)
        row["smarts"] = to_smarts(mol)

        result = Smarts.parse(row["smarts"], strict=strict)
        row["n_atoms"] = len(result.atoms)
        row["n_bonds"] = len(result.bonds)

        if check:
            if len(result.atoms) != mol.GetNumAtoms():
                raise ValueError(
                    f"parsed {len(result.atoms)} atoms, RDKit has {mol.GetNumAtoms()}"
                )
            mismatches = bond_mismatches(result, mol)
            if mismatches:
                raise ValueError(f"bonds differ from RDKit: {mismatches}")

    except (SmartsError, ValueError) as e:
        logger.warning(f"Failed on: {smiles}: {e}")
        row["error"] = str(e)

    return row


@app.command()
def dataset(
    input: Path = typer.Argument(Path("opt.json")),
    output: Optional[Path] = typer.Argument(None, help="Optional CSV summary, one row per SMILES."),
    check: bool = typer.Option(True, help="Compare each parse against RDKit's own bonds."),
    strict: bool = typer.Option(False, help="Fail patterns with unclosed ring labels."),
    directory: Optional[Path] = typer.Option(
        None,
        envvar="DATA",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Directory as base for INPUT and OUTPUT paths.",
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True),
):
    """Parse the SMARTS of every molecule in a dataset, skipping failures."""
    _set_verbosity(verbose)
    rdkit_warnings(log=False)

    if directory:
        input = directory / input
        output = directory / output if output else None

    logger.info(f"[bold blue]reading {input}[/bold blue]")
    smiles = Dataset.load(input).to_smiles()

    if output and output.exists():
        logger.warning(
            f"[bold red]output file exists and will be overwritten {output}[/bold red]",
        )

    rows = []
    with rich.progress.Progress(
        rich.progress.TextColumn("[progress.description]{task.description}"),
        rich.progress.BarColumn(),
        rich.progress.MofNCompleteColumn(),
        rich.progress.TimeElapsedColumn(),
        console=console,
    ) as pbar:
        task = pbar.add_task("Parsing...", total=len(smiles))
        for smi in smiles:
            rows.append(one_pattern(smi, check=check, strict=strict))
            pbar.update(task, advance=1)

    failed = sum(1 for r in rows if r["error"])
    logger.info(f"[bold blue]parsed {len(rows) - failed} of {len(rows)} molecules[/bold blue]")

    if output:
        logger.info(f"[bold blue]saving summary to {output}[/bold blue]")
        pd.DataFrame(rows, columns=["smiles", "smarts", "n_atoms", "n_bonds", "error"]).to_csv(
            output, index=False
        )


if __name__ == "__main__":
    app()
