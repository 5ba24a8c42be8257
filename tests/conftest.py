"""
Fixtures compartilhadas - listas de filmes dos cenários de teste
"""

import pytest

HEADER = "year;title;studios;producers;winner"

# Cenário base: (ano, título, estúdio, produtores)
BASE_MOVIES = [
    (1995, "Shadows Unleashed", "Lionsgate", "John Smith"),
    (1998, "The Last Hope", "DreamWorks", "Jane Doe and John Smith"),
    (1999, "Frozen Tears", "New Line Cinema", "Michael Johnson"),
    (2002, "Dark Abyss", "Universal Pictures", "Emily White"),
    (2005, "The Last Symphony", "Columbia Pictures", "David Black, Emily White and Michael Johnson"),
    (2007, "Beyond the Horizon", "MGM", "John Smith"),
    (2010, "Falling Skies", "Warner Bros", "Jane Doe"),
    (2012, "The Silent City", "20th Century Fox", "Michael Johnson"),
    (2013, "Whispering Shadows", "Amazon Studios", "Emily White and Michael Johnson"),
    (2015, "Crimson Moon", "Paramount Pictures", "David Black"),
    (2016, "Nightfall Rising", "HBO Films", "Jane Doe, John Smith and David Black"),
    (2018, "Golden Sunset", "Netflix Studios", "Jane Doe"),
    (2020, "Endless Journey", "Disney", "Michael Johnson"),
    (2021, "The Forgotten Path", "Apple Studios", "Emily White"),
    (2023, "Echoes of Time", "Sony Pictures", "David Black"),
]


def build_csv(winner_years, overrides=None):
    """Monta o CSV marcando como vencedores os anos informados"""
    overrides = overrides or {}
    lines = [HEADER]
    for year, title, studios, producers in BASE_MOVIES:
        producers = overrides.get(year, producers)
        winner = "yes" if year in winner_years else "no"
        lines.append(f"{year};{title};{studios};{producers};{winner}")
    return "\n".join(lines) + "\n"


SCENARIOS = {
    "no_winners": build_csv(set()),
    "one_min_one_max": build_csv({1995, 1998, 2005, 2023}),
    "tied_min_max": build_csv(
        {1995, 1998, 2005, 2023},
        overrides={1995: "John Smith and Jane Doe", 2023: "David Black and Michael Johnson"},
    ),
    "one_min_three_max": build_csv(
        {1995, 1998, 2005, 2016, 2023},
        overrides={2023: "David Black and Michael Johnson"},
    ),
}


@pytest.fixture
def write_csv(tmp_path):
    """Escreve um CSV temporário e retorna o caminho"""

    def _write(content, name="movielist.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def scenario_csv(write_csv):
    def _scenario(name):
        return write_csv(SCENARIOS[name])

    return _scenario
