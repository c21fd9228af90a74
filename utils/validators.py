"""
Edge-list validation.

Ensures an uploaded edge list has the required columns with usable values.

Time Complexity: O(n) where n = number of rows
Memory: O(1) additional beyond the DataFrame
"""

import pandas as pd

from app.config import MAX_EDGES

REQUIRED_COLUMNS = [
    "source",
    "target",
]


def validate_edge_list(df: pd.DataFrame, weighted: bool = False) -> str | None:
    """
    Validate edge-list structure. Returns error message if invalid, None if valid.

    Checks:
        1. All required columns present ('weight' too when weighted)
        2. Not empty and within MAX_EDGES
        3. No null values in required columns
        4. 'weight' is numeric and strictly positive
    """
    required = REQUIRED_COLUMNS + (["weight"] if weighted else [])
    missing = [col for col in required if col not in df.columns]
    if missing:
        return f"Missing required columns: {', '.join(missing)}"

    if df.empty:
        return "Edge list is empty."

    if len(df) > MAX_EDGES:
        return f"Edge list has {len(df)} rows, the limit is {MAX_EDGES}."

    null_cols = [col for col in required if df[col].isnull().any()]
    if null_cols:
        return f"Null values found in columns: {', '.join(null_cols)}"

    if weighted:
        try:
            weights = pd.to_numeric(df["weight"], errors="raise")
        except (ValueError, TypeError):
            return "Column 'weight' must contain numeric values."
        if (weights <= 0).any():
            return "Column 'weight' must contain strictly positive values."

    return None
