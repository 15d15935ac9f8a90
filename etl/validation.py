"""Data validation functions."""

import duckdb
import polars as pl

from etl.helpers import count_rows, get_council_ids


def validate_council(conn: duckdb.DuckDBPyConnection, council_id: str) -> dict:
    """Validate data integrity for a council."""
    issues = []
    stats = {}

    row = conn.execute("SELECT voters_count FROM flow_council WHERE id = ?", [council_id]).fetchone()
    if row is None:
        return {
            "council": council_id,
            "valid": False,
            "stats": stats,
            "issues": ["Council not found"],
        }

    stats["voters_count"] = row[0]
    stats["voters"] = count_rows(conn, "SELECT COUNT(*) FROM voter WHERE flow_council = ?", [council_id])
    if stats["voters_count"] != stats["voters"]:
        issues.append(f"votersCount is {stats['voters_count']} but {stats['voters']} voters exist")

    stats["recipients"] = count_rows(conn, "SELECT COUNT(*) FROM recipient WHERE flow_council = ?", [council_id])
    stats["managers"] = count_rows(
        conn, "SELECT COUNT(*) FROM flow_council_manager WHERE flow_council = ?", [council_id]
    )
    stats["ballots"] = count_rows(conn, "SELECT COUNT(*) FROM ballot WHERE flow_council = ?", [council_id])
    stats["latest_votes"] = count_rows(
        conn, "SELECT COUNT(*) FROM latest_vote WHERE starts_with(id, ?)", [f"{council_id}-"]
    )

    missing_votes = count_rows(
        conn,
        """
        SELECT COUNT(*) FROM (
            SELECT UNNEST(votes) AS vote_id FROM ballot WHERE flow_council = ?
        ) b
        LEFT JOIN vote ON vote.id = b.vote_id
        WHERE vote.id IS NULL
        """,
        [council_id],
    )
    stats["ballot_votes_missing"] = missing_votes
    if missing_votes > 0:
        issues.append(f"{missing_votes} ballot vote references have no vote")

    dangling_ballots = count_rows(
        conn,
        """
        SELECT COUNT(*) FROM voter
        LEFT JOIN ballot ON ballot.id = voter.ballot
        WHERE voter.flow_council = ? AND voter.ballot IS NOT NULL AND ballot.id IS NULL
        """,
        [council_id],
    )
    stats["voters_dangling_ballot"] = dangling_ballots
    if dangling_ballots > 0:
        issues.append(f"{dangling_ballots} voters reference a missing ballot")

    return {
        "council": council_id,
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }


def validate_all(conn: duckdb.DuckDBPyConnection) -> pl.DataFrame:
    """Validate every council; one summary row per council."""
    results = [validate_council(conn, council_id) for council_id in get_council_ids(conn)]

    return pl.DataFrame(
        [
            {
                "council": r["council"],
                "valid": r["valid"],
                "voters_count": r["stats"]["voters_count"],
                "voters": r["stats"]["voters"],
                "ballots": r["stats"]["ballots"],
                "issues": "; ".join(r["issues"]),
            }
            for r in results
        ],
        schema={
            "council": pl.String,
            "valid": pl.Boolean,
            "voters_count": pl.Int64,
            "voters": pl.Int64,
            "ballots": pl.Int64,
            "issues": pl.String,
        },
    )
