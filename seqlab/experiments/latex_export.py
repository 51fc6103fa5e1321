from __future__ import annotations

from pathlib import Path
from typing import Any

from seqlab.models import WideTable


def _escape_latex(text: str) -> str:
    """Simple escaping of LaTeX special characters in short fields."""
    repl = {
        "_": "\\_",
        "%": "\\%",
        "&": "\\&",
        "$": "\\$",
        "#": "\\#",
        "{": "\\{",
        "}": "\\}",
        "~": "\\textasciitilde{}",
        "^": "\\textasciicircum{}",
        "\\": "\\textbackslash{}",
    }
    out = []
    for ch in text:
        out.append(repl.get(ch, ch))
    return "".join(out)


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.4g}"
    if value is None:
        return ""
    return _escape_latex(str(value))


def write_latex_table(table: WideTable, path: str | Path, caption: str | None = None) -> Path:
    """Render a wide table as a LaTeX ``tabular`` wrapped in a ``table`` float.

    Floats are written with four significant digits; missing cells stay blank.
    """
    out_path = Path(path)
    ncols = len(table.header)
    with open(out_path, "w", encoding="utf-8") as fw:
        fw.write("% Auto-generated LaTeX table\n")
        fw.write("\\begin{table}[ht]\\centering\n")
        if caption:
            fw.write(f"\\caption{{{_escape_latex(caption)}}}\n")
        fw.write("\\small\n")
        fw.write("\\begin{tabular}{" + "r" * ncols + "}\\hline\n")
        fw.write(" & ".join(_escape_latex(h) for h in table.header) + " \\\\ \\hline\n")
        for row in table.rows:
            cells = [_fmt(v) for v in row] + [""] * (ncols - len(row))
            fw.write(" & ".join(cells) + " \\\\\n")
        fw.write("\\hline\n\\end{tabular}\n")
        fw.write("\\end{table}\n")
    return out_path
