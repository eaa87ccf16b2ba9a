from __future__ import annotations

import re
from collections import OrderedDict
from typing import List, Tuple

from ..schemas import Constraint, Objective, Problem, VariableLabels

_OBJECTIVE = re.compile(r"^(maximize|maximise|minimize|minimise|max|min)\s*(.*)$", re.IGNORECASE)
_CMP = re.compile(r"(<=|>=|==|=|≤|≥)")
_TERM = re.compile(r"([+-]?\s*\d*\.?\d*)\s*([A-Za-z_][\w]*)")
_NUMBER = re.compile(r"[+-]?\s*\d+(?:\.\d+)?")
_MULTI_BOUND = re.compile(
    r"^([A-Za-z_][\w]*(?:\s*,\s*[A-Za-z_][\w]*)+)\s*(<=|>=|≤|≥)\s*(-?\d+(?:\.\d+)?)$"
)
_UNICODE_CMP = {"≤": "<=", "≥": ">=", "==": "="}


def parse_nl_to_problem(spec: str) -> Problem:
    """
    Parse e.g. ``"maximize 8x1 + 10x2 subject to 2x1 + x2 <= 50, x1 + 2x2 <= 70"``.

    The first variable seen becomes x1 and the second x2; their written names
    are kept as labels. Non-negativity bounds are implicit and skipped.
    """

    if not spec or not spec.strip():
        raise ValueError("Specification is empty")

    normalised = " ".join(spec.replace("\n", " ").split())
    parts = re.split(r"subject to|such that|s\.t\.\s*", normalised, flags=re.IGNORECASE)
    obj_part = parts[0].strip()
    cons_part = parts[1].strip() if len(parts) > 1 else ""

    match = _OBJECTIVE.match(obj_part)
    if not match:
        raise ValueError("Objective must start with 'maximize'")
    sense_word, expr_text = match.groups()
    if sense_word.lower().startswith("min"):
        raise ValueError("Only maximisation is supported; negate the objective to minimise")
    obj_coeffs, obj_constant = _parse_expression(expr_text)
    if abs(obj_constant) > 1e-12:
        raise ValueError("Objective constant terms are not supported")

    names: List[str] = list(obj_coeffs)
    rows: List[Tuple[OrderedDict, str, float]] = []

    for token in _split_constraints(cons_part):
        m = _MULTI_BOUND.match(token)
        if m:
            var_list, cmp, rhs = m.groups()
            cmp = _UNICODE_CMP.get(cmp, cmp)
            rhs_value = float(rhs)
            for var_name in [name.strip() for name in var_list.split(",") if name.strip()]:
                _register(names, var_name)
                if cmp == ">=" and rhs_value == 0:
                    continue
                rows.append((OrderedDict([(var_name, 1.0)]), cmp, rhs_value))
            continue

        cmp_match = _CMP.search(token)
        if not cmp_match:
            raise ValueError(f"Could not parse constraint segment '{token}'")
        cmp = _UNICODE_CMP.get(cmp_match.group(1), cmp_match.group(1))
        left = token[: cmp_match.start()].strip()
        right = token[cmp_match.end() :].strip()
        if not left or not right:
            raise ValueError(f"Constraint '{token}' missing lhs or rhs")
        try:
            rhs_value = float(right.replace(" ", ""))
        except ValueError as exc:
            raise ValueError(f"Constraint '{token}' needs a numeric right-hand side") from exc
        coeffs, constant = _parse_expression(left)
        for var_name in coeffs:
            _register(names, var_name)
        if len(coeffs) == 1 and cmp == ">=" and abs(constant) < 1e-12:
            only_coef = next(iter(coeffs.values()))
            if only_coef > 0 and rhs_value == 0:
                continue
        rows.append((coeffs, cmp, rhs_value - constant))

    if len(names) != 2:
        raise ValueError(f"Expected exactly two variables, found {len(names)}: {', '.join(names)}")
    x1, x2 = names

    constraints = [
        Constraint(
            name=f"c{idx + 1}",
            a1=coeffs.get(x1, 0.0),
            a2=coeffs.get(x2, 0.0),
            cmp=cmp,
            rhs=rhs,
        )
        for idx, (coeffs, cmp, rhs) in enumerate(rows)
    ]

    return Problem(
        name="parsed",
        objective=Objective(c1=obj_coeffs.get(x1, 0.0), c2=obj_coeffs.get(x2, 0.0)),
        constraints=constraints,
        variables=VariableLabels(x1=x1, x2=x2),
    )


def _register(names: List[str], var_name: str) -> None:
    if var_name not in names:
        names.append(var_name)


def _split_constraints(cons_part: str) -> List[str]:
    tokens: List[str] = []
    if not cons_part:
        return tokens
    chunks = [chunk.strip() for chunk in re.split(r";|\band\b", cons_part, flags=re.IGNORECASE) if chunk.strip()]
    for chunk in chunks:
        pieces = [piece.strip() for piece in chunk.split(",") if piece.strip()]
        buffer: List[str] = []
        for piece in pieces:
            buffer.append(piece)
            candidate = ", ".join(buffer)
            if _CMP.search(candidate):
                tokens.append(candidate.strip())
                buffer.clear()
        if buffer:
            raise ValueError(f"Could not parse constraint segment '{', '.join(buffer)}'")
    return tokens


def _parse_expression(text: str) -> Tuple[OrderedDict, float]:
    expr = text.replace("*", "")
    coeffs: OrderedDict[str, float] = OrderedDict()
    spans: List[Tuple[int, int]] = []

    for match in _TERM.finditer(expr):
        coef_text = match.group(1).replace(" ", "")
        var_name = match.group(2)
        if coef_text in ("", "+"):
            coef = 1.0
        elif coef_text == "-":
            coef = -1.0
        else:
            coef = float(coef_text)
        coeffs[var_name] = coeffs.get(var_name, 0.0) + coef
        spans.append(match.span())

    remaining = list(expr)
    for start, end in spans:
        for idx in range(start, end):
            remaining[idx] = " "
    constant = 0.0
    for num in _NUMBER.finditer("".join(remaining)):
        val = num.group(0).replace(" ", "")
        if val:
            constant += float(val)

    return coeffs, constant
