"""
Shared fixtures: a synthetic two-team roster and the bundled sample game.
"""

import pytest

from hoopreplay.roster import PlayerEntry, RosterConfig, TeamRoster, GameInfo
from hoopreplay.parser import TranscriptParser
from hoopreplay.tests.helpers import SAMPLES_DIR


@pytest.fixture
def home_roster():
    return TeamRoster(
        name="主队",
        id="home-team",
        players=(
            PlayerEntry("张三", number="1"),
            PlayerEntry("李四", number="2"),
            PlayerEntry("王五", number="3"),
            PlayerEntry("赵六", number="4"),
            PlayerEntry("L. 王强", number="5", aliases=("王强", "L.王强")),
            PlayerEntry("周八", number="8"),
            PlayerEntry("B. 王强", number="9", aliases=("B.王强",)),
        ),
        starters=("张三", "李四", "王五", "赵六", "L. 王强"),
    )


@pytest.fixture
def away_roster():
    return TeamRoster(
        name="客队",
        id="away-team",
        players=(
            PlayerEntry("陈一"),
            PlayerEntry("林二"),
            PlayerEntry("黄三"),
            PlayerEntry("郑四"),
            PlayerEntry("刘五-长名", aliases=("刘五",)),
            PlayerEntry("杨六"),
            PlayerEntry("何七"),
        ),
        starters=("陈一", "林二", "黄三", "郑四", "刘五-长名"),
    )


@pytest.fixture
def roster(home_roster, away_roster):
    return RosterConfig(home=home_roster, away=away_roster, game=GameInfo(id="test-game"))


@pytest.fixture
def parser(roster):
    return TranscriptParser(roster)


@pytest.fixture
def sample_paths():
    return SAMPLES_DIR / "transcript.tsv", SAMPLES_DIR / "roster.json"
