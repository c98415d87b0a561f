"""File helpers for population-stratification inputs and outputs."""

from pathlib import Path

from kmdiff.exceptions import IOError_


def _read_text(path):
    try:
        return Path(path).read_text()
    except OSError as err:
        raise IOError_(f"Unable to open {path}.") from err


def _write_text(path, text):
    try:
        Path(path).write_text(text)
    except OSError as err:
        raise IOError_(f"Unable to open {path}.") from err


def write_gwas_eigenstrat_total(path, controls, cases):
    """Write the per-sample totals, controls then cases, one per line."""
    _write_text(path, "".join(f"{value}\n" for value in (*controls, *cases)))


def pca_to_pcs(pca_path, pcs_path):
    """Copy the rows of a PCA file, skipping its header of eigenvalues.

    The first line holds the number of eigenvalue lines that follow it.
    """
    lines = _read_text(pca_path).splitlines()
    if not lines:
        raise IOError_(f"{pca_path} is empty.")
    try:
        skip = int(lines[0].split()[0])
    except (IndexError, ValueError) as err:
        raise IOError_(f"Bad header in {pca_path}: {lines[0]!r}") from err
    _write_text(pcs_path, "".join(f"{line}\n" for line in lines[1 + skip:]))


def load_phenotypes(path):
    """Read an individual file (id, gender, status); Case gives 0.0, others 1.0."""
    phenotypes = []
    for line in _read_text(path).splitlines():
        fields = line.split("\t")
        if len(fields) < 3:
            raise IOError_(f"Bad line in {path}: {line!r}")
        phenotypes.append(0.0 if fields[2] == "Case" else 1.0)
    return phenotypes


def load_pca_matrix(path, nb_samples, nb_components):
    """Read ``nb_samples`` rows of ``nb_components`` whitespace-separated values."""
    tokens = _read_text(path).split()
    needed = nb_samples * nb_components
    if len(tokens) < needed:
        raise IOError_(f"{path} holds {len(tokens)} values, {needed} expected.")
    try:
        values = [float(token) for token in tokens[:needed]]
    except ValueError as err:
        raise IOError_(f"Non-numeric value in {path}.") from err
    return [
        values[row * nb_components:(row + 1) * nb_components]
        for row in range(nb_samples)
    ]