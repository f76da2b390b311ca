"""Shared test fixtures for stats-structurizer."""

import pytest

from stats_structurizer.samples import LEAGUE_TABLE, MATCH_STATS, STANDARD_STATS


@pytest.fixture
def two_block_stats():
    """Two Casa/Fora/Global mini tables separated by a club name line."""
    return (
        " \tCasa\tFora\tGlobal\n"
        "Média de gols marcados por jogo\t1\t2.33\t1.67\n"
        "Jogos sem sofrer\t-\t67%\t33%\n"
        "VfB Stuttgart\n"
        " \tCasa\tFora\tGlobal\n"
        "Média de gols marcados por jogo\t2.67\t1.33\t2\n"
        "Jogos com Mais de 2,5 Gols\t67%\t33%\t50%\n"
        "\n"
        "Lê mais em: https://www.example.com/stats/match/roma/stuttgart\n"
    )


@pytest.fixture
def league_text():
    """Tab-separated league table without crest placeholders."""
    return (
        "Rk\tSquad\tMP\tW\tD\tL\tGF\tGA\tGD\tPts\tPts/MP\n"
        "1\tManchester City\t11\t8\t2\t1\t27\t8\t+19\t26\t2.36\n"
        "2\tNottingham Forest\t11\t3\t2\t6\t12\t17\t-5\t11\t1.00\n"
    )


@pytest.fixture
def flattened_text():
    """Single header row with group names folded into each cell."""
    return (
        "Squad\tPlaying Time MP\tPlaying Time Min\tPerformance Gls\tPer 90 Minutes Gls\n"
        "Arsenal\t22\t1,980\t37\t1.68\n"
        "Aston Villa\t22\t1,980\t32\t1.45\n"
    )


@pytest.fixture
def match_stats():
    return MATCH_STATS


@pytest.fixture
def league_sample():
    return LEAGUE_TABLE


@pytest.fixture
def standard_stats():
    return STANDARD_STATS
