import pytest

from sparrow.pipe import Pipe
from sparrow.pipe_pool import LEVEL_KINDS, PipePool


class ScriptedRandom:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.values.pop(0)


def test_hard_level_returns_bottom_then_top_of_same_kind():
    pool = PipePool(rng=ScriptedRandom([1]))
    pool.choose_level(3)
    bottom = pool.get_pipe()
    top = pool.get_pipe()
    assert (bottom.kind, bottom.is_top) == ("flag", False)
    assert (top.kind, top.is_top) == ("flag", True)


def test_easy_level_chooses_among_five_kinds():
    rng = ScriptedRandom([4, 0])
    pool = PipePool(rng=rng)
    pool.choose_level(1)
    kinds = [pool.get_pipe().kind for _ in range(4)]
    assert kinds == ["hymera", "hymera", "palaz", "palaz"]
    assert rng.calls == [len(LEVEL_KINDS[1])] * 2


def test_medium_level_kinds():
    rng = ScriptedRandom([2])
    pool = PipePool(rng=rng)
    pool.choose_level(2)
    assert pool.get_pipe().kind == "korona"
    assert rng.calls == [len(LEVEL_KINDS[2])]


def test_unknown_level_raises():
    pool = PipePool(rng=ScriptedRandom([0]))
    with pytest.raises(ValueError):
        pool.get_pipe()


def test_reset_starts_with_bottom_pipe():
    pool = PipePool(rng=ScriptedRandom([0, 3]))
    pool.choose_level(3)
    assert pool.get_pipe().is_top is False
    pool.reset()
    pipe = pool.get_pipe()
    assert (pipe.kind, pipe.is_top) == ("triumf", False)


def test_reset_pipe_clears_scored():
    pool = PipePool()
    pipe = Pipe("kse", False)
    pipe.scored = True
    pool.reset_pipe(pipe)
    assert pipe.scored is False


def test_loader_called_for_every_pipe():
    seen = []

    def loader(kind, is_top):
        seen.append((kind, is_top))
        return None

    PipePool(loader=loader)
    assert len(seen) == 26
    expected = {(k, t) for kinds in LEVEL_KINDS.values() for k in kinds for t in (False, True)}
    assert set(seen) == expected