"""Example inputs, one per supported source layout.

Handy for trying the CLI: ``stats-structurizer sample league | stats-structurizer parse``.
"""
from __future__ import annotations

from typing import Dict

MATCH_STATS = """\
 \tCasa\tFora\tGlobal
Média de gols marcados por jogo\t1\t2.33\t1.67
Média de gols sofridos por jogo\t1.33\t0.33\t0.83
Média de gols marcados+sofridos\t2.33\t2.66\t2.5
Jogos sem sofrer\t-\t67%\t33%
Jogos sem marcar gols\t33%\t-\t-
Jogos com Mais de 2,5 Gols\t67%\t67%\t67%
Jogos com menos de 2,5 Gols\t33%\t33%\t33%
Casa Global
Abre marcador (qualquer altura)\t1 em 3\t33%
 ⇒ e está a vencer ao intervalo\t1 em 1\t100%
 ⇒ e vence no final\t1 em 1\t100%
Reviravoltas\t0 em 2\t0%
VfB Stuttgart
 \tCasa\tFora\tGlobal
Média de gols marcados por jogo\t2.67\t1.33\t2
Média de gols sofridos por jogo\t0.67\t1\t0.83
Média de gols marcados+sofridos\t3.34\t2.33\t2.83
Jogos sem sofrer\t33%\t33%\t33%
Jogos sem marcar gols\t-\t67%\t33%
Jogos com Mais de 2,5 Gols\t67%\t33%\t50%
Jogos com menos de 2,5 Gols\t33%\t67%\t50%

Lê mais em: https://www.academiadasapostasbrasil.com/stats/match/europa/liga-europa/roma/stuttgart/oJqmnv41jmxNr
"""

LEAGUE_TABLE = """\
Rk\tSquad\tMP\tW\tD\tL\tGF\tGA\tGD\tPts\tPts/MP\tMP\tW\tD\tL\tGF\tGA\tGD\tPts\tPts/MP
1\tClub Crest Arsenal\t11\t9\t2\t0\t26\t5\t+21\t29\t2.64\t11\t6\t3\t2\t14\t9\t+5\t21\t1.91
2\tClub Crest Manchester City\t11\t8\t2\t1\t27\t8\t+19\t26\t2.36\t11\t5\t2\t4\t18\t13\t+5\t17\t1.55
3\tClub Crest Aston Villa\t11\t8\t1\t2\t18\t9\t+9\t25\t2.27\t11\t5\t3\t3\t15\t16\t-1\t18\t1.64
4\tClub Crest Liverpool\t11\t6\t3\t2\t16\t11\t+5\t21\t1.91\t11\t4\t3\t4\t17\t18\t-1\t15\t1.36
5\tClub Crest Manchester Utd\t11\t6\t3\t2\t20\t13\t+7\t21\t1.91\t11\t3\t5\t3\t18\t19\t-1\t14\t1.27
6\tClub Crest Chelsea\t11\t5\t3\t3\t17\t11\t+6\t18\t1.64\t11\t4\t4\t3\t19\t13\t+6\t16\t1.45
7\tClub Crest Brentford\t11\t7\t3\t1\t23\t10\t+13\t24\t2.18\t11\t3\t0\t8\t12\t20\t-8\t9\t0.82
8\tClub Crest Newcastle United\t11\t7\t2\t2\t22\t15\t+7\t23\t2.09\t11\t2\t4\t5\t10\t12\t-2\t10\t0.91
9\tClub Crest Sunderland\t11\t6\t5\t0\t18\t9\t+9\t23\t2.09\t11\t2\t4\t5\t5\t14\t-9\t10\t0.91
10\tClub Crest Everton\t11\t4\t3\t4\t14\t15\t-1\t15\t1.36\t11\t5\t2\t4\t10\t10\t0\t17\t1.55
11\tClub Crest Fulham\t11\t6\t2\t3\t19\t13\t+6\t20\t1.82\t11\t3\t2\t6\t11\t18\t-7\t11\t1.00
12\tClub Crest Brighton\t11\t5\t5\t1\t19\t12\t+7\t20\t1.82\t11\t2\t4\t5\t13\t17\t-4\t10\t0.91
13\tClub Crest Crystal Palace\t11\t2\t6\t3\t10\t12\t-2\t12\t1.09\t11\t5\t1\t5\t13\t13\t0\t16\t1.45
14\tClub Crest Tottenham Hotspur\t11\t2\t3\t6\t13\t14\t-1\t9\t0.82\t11\t5\t3\t3\t18\t15\t+3\t18\t1.64
15\tClub Crest Bournemouth\t11\t5\t4\t2\t16\t11\t+5\t19\t1.73\t11\t1\t5\t5\t19\t30\t-11\t8\t0.73
16\tClub Crest Leeds United\t11\t5\t4\t2\t19\t13\t+6\t19\t1.73\t11\t1\t3\t7\t11\t24\t-13\t6\t0.55
17\tClub Crest Nottingham Forest\t11\t3\t2\t6\t12\t17\t-5\t11\t1.00\t11\t3\t2\t6\t9\t17\t-8\t11\t1.00
18\tClub Crest West Ham United\t11\t2\t1\t8\t13\t25\t-12\t7\t0.64\t11\t2\t4\t5\t11\t19\t-8\t10\t0.91
19\tClub Crest Burnley\t11\t2\t3\t6\t10\t15\t-5\t9\t0.82\t11\t1\t2\t8\t13\t27\t-14\t5\t0.45
20\tClub Crest Wolves\t11\t1\t2\t8\t10\t23\t-13\t5\t0.45\t11\t0\t3\t8\t5\t18\t-13\t3\t0.27
"""

STANDARD_STATS = """\
Playing Time\tPerformance\tPer 90 Minutes
Squad\t# Pl\tAge\tPoss\tMP\tStarts\tMin\t90s\tGls\tAst\tG+A\tG-PK\tPK\tPKatt\tCrdY\tCrdR\tGls\tAst\tG+A\tG-PK\tG+A-PK
Arsenal\t24\t26.6\t58.3\t22\t242\t1,980\t22.0\t37\t27\t64\t34\t3\t3\t30\t0\t1.68\t1.23\t2.91\t1.55\t2.77
Aston Villa\t26\t28.4\t53.5\t22\t242\t1,980\t22.0\t32\t24\t56\t32\t0\t0\t33\t1\t1.45\t1.09\t2.55\t1.45\t2.55
Bournemouth\t24\t25.7\t49.8\t22\t242\t1,980\t22.0\t35\t18\t53\t32\t3\t4\t54\t1\t1.59\t0.82\t2.41\t1.45\t2.27
Brentford\t23\t25.7\t46.6\t22\t242\t1,980\t22.0\t34\t21\t55\t29\t5\t7\t43\t0\t1.55\t0.95\t2.50\t1.32\t2.27
Brighton\t26\t26.0\t52.5\t22\t242\t1,980\t22.0\t31\t18\t49\t28\t3\t5\t57\t0\t1.41\t0.82\t2.23\t1.27\t2.09
Burnley\t25\t27.8\t40.9\t22\t242\t1,980\t22.0\t22\t16\t38\t20\t2\t2\t36\t2\t1.00\t0.73\t1.73\t0.91\t1.64
Chelsea\t25\t24.7\t57.3\t22\t242\t1,980\t22.0\t36\t25\t61\t33\t3\t3\t52\t5\t1.64\t1.14\t2.77\t1.50\t2.64
Crystal Palace\t25\t26.8\t42.9\t22\t242\t1,980\t22.0\t22\t12\t34\t18\t4\t4\t41\t0\t1.00\t0.55\t1.55\t0.82\t1.36
Everton\t20\t28.0\t42.8\t22\t242\t1,980\t22.0\t23\t19\t42\t22\t1\t1\t42\t3\t1.05\t0.86\t1.91\t1.00\t1.86
Fulham\t23\t28.7\t51.4\t22\t242\t1,980\t22.0\t27\t19\t46\t26\t1\t1\t50\t0\t1.23\t0.86\t2.09\t1.18\t2.05
Leeds United\t23\t27.0\t45.6\t22\t242\t1,980\t22.0\t30\t14\t44\t27\t3\t4\t32\t0\t1.36\t0.64\t2.00\t1.23\t1.86
Liverpool\t23\t27.0\t61.7\t22\t242\t1,980\t22.0\t32\t22\t54\t31\t1\t2\t37\t0\t1.45\t1.00\t2.45\t1.41\t2.41
Manchester City\t26\t25.8\t59.4\t22\t242\t1,980\t22.0\t42\t33\t75\t40\t2\t3\t38\t0\t1.91\t1.50\t3.41\t1.82\t3.32
Manchester Utd\t26\t26.3\t53.2\t22\t242\t1,980\t22.0\t36\t25\t61\t34\t2\t4\t31\t1\t1.64\t1.14\t2.77\t1.55\t2.68
Newcastle United\t24\t27.4\t53.3\t22\t242\t1,980\t22.0\t32\t17\t49\t28\t4\t4\t32\t2\t1.45\t0.77\t2.23\t1.27\t2.05
Nottingham Forest\t27\t26.3\t49.5\t22\t242\t1,980\t22.0\t21\t13\t34\t19\t2\t2\t35\t0\t0.95\t0.59\t1.55\t0.86\t1.45
Sunderland\t26\t26.0\t43.3\t22\t242\t1,980\t22.0\t21\t15\t36\t19\t2\t3\t44\t2\t0.95\t0.68\t1.64\t0.86\t1.55
Tottenham Hotspur\t25\t25.9\t51.8\t22\t242\t1,980\t22.0\t30\t24\t54\t30\t0\t0\t60\t2\t1.36\t1.09\t2.45\t1.36\t2.45
West Ham United\t30\t27.0\t43.1\t22\t242\t1,980\t22.0\t22\t12\t34\t20\t2\t2\t38\t2\t1.00\t0.55\t1.55\t0.91\t1.45
Wolves\t26\t26.7\t44.4\t22\t242\t1,980\t22.0\t14\t9\t23\t12\t2\t3\t46\t2\t0.64\t0.41\t1.05\t0.55\t0.95
"""

SAMPLES: Dict[str, str] = {
    "stats": MATCH_STATS,
    "league": LEAGUE_TABLE,
    "complex": STANDARD_STATS,
}


def get_sample(name: str) -> str:
    """Return the bundled sample called *name*.

    Raises:
        ValueError: If no sample has that name.
    """
    try:
        return SAMPLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown sample: {name} (choose from {', '.join(SAMPLES)})"
        ) from None
