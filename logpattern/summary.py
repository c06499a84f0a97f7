"""Build formats for many clusters and summarize how often each occurs."""

import logging
from typing import Iterable, List, Optional

import pandas as pd
from tqdm import tqdm

from logpattern.errors import LogPatternError
from logpattern.format import Format, gen_format

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["id", "short_id", "template", "count", "ratio", "variable_segments"]


def gen_formats(clusters: Iterable, strict: bool = True, progress: bool = False) -> List[Format]:
    """
    Generate one format per cluster, in cluster order.

    Args:
        clusters: Iterable of clusters.
        strict (bool): Re-raise construction errors. When False, the failing
            cluster is logged and skipped.
        progress (bool): Show a tqdm progress bar.

    Returns:
        list[Format]: Formats for every cluster that was built successfully.
    """
    formats = []
    iterator = tqdm(clusters, desc="Generating Formats", mininterval=0.5) if progress else clusters

    for idx, cluster in enumerate(iterator):
        try:
            formats.append(gen_format(cluster))
        except LogPatternError as e:
            if strict:
                raise
            logger.error(f"Skipping cluster {idx}: {e}")

    logger.info(f"🧩 Generated {len(formats)} formats")
    return formats


def summarize_formats(formats: Iterable[Format], top_n: Optional[int] = None) -> pd.DataFrame:
    """
    Frequency table of formats, most frequent first.

    ``ratio`` is each format's share of all logs across ``formats``.
    """
    rows = [
        {
            "id": fmt.id,
            "short_id": fmt.short_id,
            "template": fmt.template(color=False),
            "count": fmt.count,
            "variable_segments": sum(1 for seg in fmt.segments if not seg.fixed()),
        }
        for fmt in formats
    ]

    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df = pd.DataFrame(rows)
    total = df["count"].sum()
    df["ratio"] = (df["count"] / total).round(2) if total else 0.0
    df = df.sort_values("count", ascending=False, kind="stable").reset_index(drop=True)

    if top_n is not None:
        df = df.head(top_n)

    return df[SUMMARY_COLUMNS]
