"""
Tests for playing-time accrual.
"""

import logging

import pytest

from hoopreplay.core.events import GameEventType as T, TeamSide
from hoopreplay.core.state import player_key
from hoopreplay.parser import parse
from hoopreplay.replay import ReplayEngine, initialize_state, replay
from hoopreplay.roster import load_roster_config
from hoopreplay.tests.helpers import SAMPLES_DIR, event, row, transcript


def seconds(state, name, side=TeamSide.HOME):
    return state.seconds_played[player_key(side, name)]


@pytest.fixture
def state(home_roster, away_roster):
    return initialize_state(home_roster, away_roster)


def test_seed_starters_on_court_bench_off(state):
    starter = state.time_status[player_key(TeamSide.HOME, "张三")]
    bench = state.time_status[player_key(TeamSide.HOME, "周八")]

    assert starter.in_game and starter.last_time_update == "12:00"
    assert not bench.in_game and bench.last_time_update == "00:00"
    assert all(v == 0 for v in state.seconds_played.values())


def test_substitution_splits_the_quarter(home_roster, away_roster):
    events = [
        event(T.SUBSTITUTION, "周八", "08:00", replaced_player="张三"),
        event(T.FOUL, "李四", "00:00"),
    ]

    state = replay(events, home_roster, away_roster).state

    assert seconds(state, "张三") == 240
    assert seconds(state, "周八") == 480
    assert seconds(state, "李四") == 720
    assert state.find_player(TeamSide.HOME, "张三").stats.play_time == 4
    assert state.find_player(TeamSide.HOME, "周八").stats.play_time == 8


def test_bench_player_never_subbed_in_gets_nothing(home_roster, away_roster):
    state = replay([event(T.FOUL, "张三", "03:00")], home_roster, away_roster).state

    assert seconds(state, "B. 王强") == 0
    assert seconds(state, "陈一", TeamSide.AWAY) == 540


def test_minutes_round_half_up(home_roster, away_roster):
    state = replay([event(T.FOUL, "张三", "10:30")], home_roster, away_roster).state

    assert seconds(state, "张三") == 90
    assert state.find_player(TeamSide.HOME, "张三").stats.play_time == 2


def test_quarter_start_resets_without_crediting_tail(home_roster, away_roster):
    events = [
        event(T.FOUL, "张三", "06:00", quarter=1),
        event(T.QUARTER_START, "", "12:00", quarter=2),
        event(T.FOUL, "张三", "10:00", quarter=2),
    ]

    state = replay(events, home_roster, away_roster).state

    assert seconds(state, "张三") == 360 + 120


def test_implicit_quarter_change_resets_clock(home_roster, away_roster):
    events = [
        event(T.FOUL, "张三", "06:00", quarter=1),
        event(T.FOUL, "张三", "11:00", quarter=2),
    ]

    state = replay(events, home_roster, away_roster).state

    assert seconds(state, "张三") == 360 + 60
    assert state.clock_quarter == 2


def test_clock_moving_backwards_credits_nothing(home_roster, away_roster):
    events = [
        event(T.FOUL, "张三", "10:00"),
        event(T.FOUL, "张三", "12:00"),
        event(T.FOUL, "张三", "09:00"),
    ]

    state = replay(events, home_roster, away_roster).state

    assert seconds(state, "张三") == 180


def test_subbed_out_player_stops_accruing(home_roster, away_roster):
    events = [
        event(T.SUBSTITUTION, "周八", "08:00", replaced_player="张三"),
        event(T.SUBSTITUTION, "张三", "04:00", replaced_player="周八"),
        event(T.FOUL, "李四", "01:00"),
    ]

    state = replay(events, home_roster, away_roster).state

    assert seconds(state, "张三") == 240 + 180
    assert seconds(state, "周八") == 240


def test_substitution_without_outgoing_changes_nothing(home_roster, away_roster):
    events = [
        event(T.SUBSTITUTION, "周八", "06:00"),
        event(T.FOUL, "张三", "00:00"),
    ]

    state = replay(events, home_roster, away_roster).state

    assert seconds(state, "周八") == 0
    assert seconds(state, "张三") == 720


def test_substitution_of_bench_player_for_bench_player_is_ignored(home_roster, away_roster):
    events = [
        event(T.SUBSTITUTION, "周八", "06:00", replaced_player="B. 王强"),
        event(T.FOUL, "张三", "00:00"),
    ]

    state = replay(events, home_roster, away_roster).state

    assert seconds(state, "周八") == 0
    assert sum(state.seconds_played.values()) == 10 * 720


def test_substitution_of_unrostered_player_warns(state, caplog):
    with caplog.at_level(logging.WARNING):
        ReplayEngine().apply_event(state, event(T.SUBSTITUTION, "外援", "06:00", replaced_player="张三"))

    assert state.time_status[player_key(TeamSide.HOME, "张三")].in_game
    assert "not on roster" in caplog.text


def test_unmatched_substitution_keeps_five_on_court(parser, home_roster, away_roster):
    text = transcript(
        "第1节开始",
        row("06:00", "换人：周八 替换 无名氏", "0-0"),
        row("00:00", "张三 犯规", "0-0"),
    )

    state = replay(parser.parse(text), home_roster, away_roster).state

    home = sum(v for k, v in state.seconds_played.items() if k.startswith("home-"))
    assert home == 5 * 720
    assert seconds(state, "周八") == 0


def quarter_seconds(events, home_roster, away_roster):
    """Seconds accrued per (team, quarter), from seeks at each quarter's last event."""
    last_index = {}
    for i, ev in enumerate(events):
        last_index[ev.quarter] = i

    totals, previous = {}, {}
    for quarter in sorted(last_index):
        state = replay(events, home_roster, away_roster, to_index=last_index[quarter]).state
        for side in TeamSide:
            prefix = f"{side.value}-"
            now = sum(v for k, v in state.seconds_played.items() if k.startswith(prefix))
            totals[(side, quarter)] = now - previous.get(side, 0)
            previous[side] = now
    return totals


def test_team_seconds_per_quarter_never_exceed_five_players(parser, home_roster, away_roster):
    text = transcript(
        "第1节开始",
        row("10:00", "换人：周八 替换 张三", "0-0", "换人：杨六 替换 陈一"),
        row("08:00", "换人：B.王强 替换 周八", "0-0"),
        row("06:00", "换人：周八 替换 某人", "0-0", "换人：某人 替换 林二"),
        row("05:00", "换人：张三 替换 周八", "0-0"),
        row("00:00", "李四 犯规", "0-0"),
        "第2节开始",
        row("09:00", "换人：周八 替换 李四", "0-0", "换人：何七 替换 杨六"),
        row("03:00", "张三 犯规", "0-0", "陈一 犯规"),
    )
    events = parser.parse(text)

    for (side, quarter), total in quarter_seconds(events, home_roster, away_roster).items():
        assert total <= 5 * 720, (side, quarter, total)


def test_sample_game_conserves_playing_time():
    config = load_roster_config(SAMPLES_DIR / "roster.json")
    events = parse((SAMPLES_DIR / "transcript.tsv").read_text(encoding="utf-8"), config)

    totals = quarter_seconds(events, config.home, config.away)

    assert totals[(TeamSide.HOME, 1)] == 5 * 720
    assert all(total <= 5 * 720 for total in totals.values())


def test_invalid_event_clock_skips_accrual(state, caplog):
    engine = ReplayEngine()
    with caplog.at_level(logging.WARNING):
        engine.apply_event(state, event(T.FOUL, "张三", "later"))

    assert seconds(state, "张三") == 0
    assert state.applied == 1
    assert "invalid clock" in caplog.text


def test_team_play_time_is_sum_of_players(home_roster, away_roster):
    events = [
        event(T.SUBSTITUTION, "周八", "08:00", replaced_player="张三"),
        event(T.FOUL, "李四", "00:00"),
    ]

    state = replay(events, home_roster, away_roster).state

    assert state.home_team.stats.play_time == sum(p.stats.play_time for p in state.home_team.players)
    assert state.home_team.stats.play_time == 60
