import pytest

from logpattern.cluster import Cluster, Log
from logpattern.errors import InvalidInputError
from logpattern.summary import SUMMARY_COLUMNS, gen_formats, summarize_formats


@pytest.fixture
def clusters():
    return [
        Cluster.from_token_lists([["GET ", "/a"], ["GET ", "/b"]]),
        Cluster.from_token_lists([["boot ", "ok"]] * 6),
        Cluster.from_token_lists([["user ", "alice", " out"], ["user ", "bob", " out"]]),
    ]


def test_gen_formats_keeps_order(clusters):
    formats = gen_formats(clusters)
    assert [f.count for f in formats] == [2, 6, 2]
    assert formats[1].cluster is clusters[1]


def test_gen_formats_with_progress(clusters):
    assert len(gen_formats(clusters, progress=True)) == 3


def test_gen_formats_strict_raises(clusters):
    clusters.insert(1, Cluster())
    with pytest.raises(InvalidInputError):
        gen_formats(clusters)


def test_gen_formats_skips_bad_clusters(clusters):
    clusters.append(Cluster())
    clusters.append(Cluster([Log.from_tokens(["a"]), Log.from_tokens(["a", "b"])]))
    formats = gen_formats(clusters, strict=False)
    assert len(formats) == 3


def test_summarize_formats(clusters):
    df = summarize_formats(gen_formats(clusters))

    assert list(df.columns) == SUMMARY_COLUMNS
    assert df["count"].tolist() == [6, 2, 2]
    assert df.loc[0, "template"] == "boot ok"
    assert df.loc[0, "ratio"] == 0.6
    assert df.loc[0, "variable_segments"] == 0
    # ties keep input order
    assert df["template"].tolist()[1:] == ["GET *", "user * out"]
    assert df.loc[1, "short_id"] == df.loc[1, "id"][:8]


def test_summarize_formats_top_n(clusters):
    df = summarize_formats(gen_formats(clusters), top_n=1)
    assert len(df) == 1
    assert df.loc[0, "count"] == 6


def test_summarize_no_formats():
    df = summarize_formats([])
    assert df.empty
    assert list(df.columns) == SUMMARY_COLUMNS
