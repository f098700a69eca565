from pingpong.state import Phase, PhaseMachine, Score


def test_starts_in_start():
    assert PhaseMachine().phase is Phase.START


def test_activate_from_start_plays_with_fresh_score():
    m, score = PhaseMachine(), Score(2, 1)
    assert m.activate(score) is Phase.PLAYING
    assert (score.player, score.ai) == (0, 0)


def test_activate_while_playing_is_ignored():
    m, score = PhaseMachine(), Score()
    m.activate(score)
    score.player = 3
    assert m.activate(score) is None
    assert m.phase is Phase.PLAYING
    assert score.player == 3


def test_win_threshold():
    m, score = PhaseMachine(win_score=5), Score()
    m.activate(score)
    score.ai = 4
    assert not m.check_win(score)
    score.ai = 5
    assert m.check_win(score)
    assert m.phase is Phase.GAME_OVER


def test_restart_takes_two_activations():
    m, score = PhaseMachine(), Score()
    m.activate(score)
    score.player = 5
    m.check_win(score)
    assert m.activate(score) is Phase.START
    assert (score.player, score.ai) == (0, 0)
    assert m.activate(score) is Phase.PLAYING


def test_win_is_not_checked_outside_play():
    m = PhaseMachine()
    assert not m.check_win(Score(9, 0))
    assert m.phase is Phase.START
