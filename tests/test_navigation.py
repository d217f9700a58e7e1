"""Tests for the navigation state machine."""

from gridprompt.choices import ChoiceSequence, Separator
from gridprompt.models import Direction, KeyEvent
from gridprompt.navigation import NavigationEngine, resolve_default

UP = KeyEvent.arrow(Direction.UP)
DOWN = KeyEvent.arrow(Direction.DOWN)
LEFT = KeyEvent.arrow(Direction.LEFT)
RIGHT = KeyEvent.arrow(Direction.RIGHT)
SHIFT_UP = KeyEvent.arrow(Direction.UP, shift=True)
SHIFT_DOWN = KeyEvent.arrow(Direction.DOWN, shift=True)
SHIFT_LEFT = KeyEvent.arrow(Direction.LEFT, shift=True)
SHIFT_RIGHT = KeyEvent.arrow(Direction.RIGHT, shift=True)


def make_engine(choices, cols=None, default=None, swap_separators=False) -> NavigationEngine:
    return NavigationEngine(
        ChoiceSequence(choices), cols=cols, default=default, swap_separators=swap_separators
    )


class TestResolveDefault:
    def test_numeric_default(self):
        assert resolve_default(ChoiceSequence("ABCD"), 3) == 3

    def test_numeric_default_out_of_range(self):
        assert resolve_default(ChoiceSequence("ABCD"), 4) == 0
        assert resolve_default(ChoiceSequence("ABCD"), -1) == 0

    def test_string_default(self):
        assert resolve_default(ChoiceSequence("ABCD"), "C") == 2

    def test_unknown_string_default(self):
        assert resolve_default(ChoiceSequence("ABCD"), "Z") == 0

    def test_other_defaults(self):
        seq = ChoiceSequence("ABCD")
        assert resolve_default(seq, None) == 0
        assert resolve_default(seq, True) == 0
        assert resolve_default(seq, 2.0) == 0


class TestNavigate:
    def test_plain_arrows(self):
        engine = make_engine(list("ABCDEFGHI"), cols=3, default=4)
        engine.handle(UP)
        assert engine.selected_index == 1
        engine.handle(RIGHT)
        assert engine.selected_index == 2
        engine.handle(DOWN)
        assert engine.selected_index == 5
        engine.handle(LEFT)
        assert engine.selected_index == 4

    def test_up_from_top_row_wraps(self):
        engine = make_engine(list("ABCDEFGHI"), cols=3, default=1)
        engine.handle(UP)
        assert engine.selected_index == 7

    def test_down_from_bottom_row_wraps(self):
        engine = make_engine(list("ABCDEFGHI"), cols=3, default=7)
        engine.handle(DOWN)
        assert engine.selected_index == 1

    def test_right_wraps_within_row(self):
        engine = make_engine(list("ABCDEF"), cols=3, default=2)
        engine.handle(RIGHT)
        assert engine.selected_index == 0

    def test_wrap_onto_short_last_row_clamps(self):
        engine = make_engine(list("ABCDEFG"), cols=3, default=2)
        engine.handle(UP)
        assert engine.selected_index == 6

    def test_plain_arrows_do_not_reorder(self):
        engine = make_engine(list("ABCD"), cols=2)
        for event in (RIGHT, DOWN, LEFT, UP):
            engine.handle(event)
        assert engine.choices.as_answers() == list("ABCD")


class TestMove:
    def test_shift_right_swaps_and_follows(self):
        """A..F in 3 columns: Shift+Right on A gives B, A, ..."""
        engine = make_engine(list("ABCDEF"), cols=3)
        assert (engine.shape.rows, engine.shape.cols) == (2, 3)

        engine.handle(SHIFT_RIGHT)

        assert engine.choices.as_answers() == list("BACDEF")
        assert engine.selected_index == 1
        assert engine.state.is_moving

    def test_shift_down_swaps_rows(self):
        engine = make_engine(list("ABCDEF"), cols=3, default=1)
        engine.handle(SHIFT_DOWN)
        assert engine.choices.as_answers() == list("AECDBF")
        assert engine.selected_index == 4

    def test_shift_up_wraps(self):
        engine = make_engine(list("ABCDEF"), cols=3, default=0)
        engine.handle(SHIFT_UP)
        assert engine.choices.as_answers() == list("DBCAEF")
        assert engine.selected_index == 3

    def test_shift_left_wraps(self):
        engine = make_engine(list("ABCDEF"), cols=3, default=3)
        engine.handle(SHIFT_LEFT)
        assert engine.choices.as_answers() == list("ABCFED")
        assert engine.selected_index == 5

    def test_moving_cell_keeps_moving(self):
        engine = make_engine(list("ABCD"), cols=4)
        engine.handle(SHIFT_RIGHT)
        engine.handle(SHIFT_RIGHT)
        engine.handle(SHIFT_RIGHT)
        assert engine.choices.as_answers() == list("BCDA")
        assert engine.selected_index == 3

    def test_plain_key_ends_moving_state(self):
        engine = make_engine(list("ABCD"), cols=2)
        engine.handle(SHIFT_RIGHT)
        engine.handle(DOWN)
        assert not engine.state.is_moving

    def test_single_column_wrap_is_noop_swap(self):
        engine = make_engine(["A", "B"], cols=1)
        engine.handle(SHIFT_LEFT)
        assert engine.choices.as_answers() == ["A", "B"]
        assert engine.selected_index == 0
        assert engine.state.is_moving

    def test_shift_clamped_onto_itself_keeps_moving(self):
        """Shift+Right on the lone cell of a short last row stays put but still moves."""
        engine = make_engine(list("ABCDEFG"), cols=3, default=6)
        engine.handle(SHIFT_RIGHT)
        assert engine.choices.as_answers() == list("ABCDEFG")
        assert engine.selected_index == 6
        assert engine.state.is_moving


class TestSeparators:
    def choices(self):
        return ["A", "B", Separator(), "C", "D"]

    def test_separator_is_reachable(self):
        engine = make_engine(self.choices(), cols=3, default=1)
        engine.handle(RIGHT)
        assert engine.selected_index == 2

    def test_shift_onto_separator_does_not_swap(self):
        engine = make_engine(self.choices(), cols=3, default=1)
        engine.handle(SHIFT_RIGHT)
        assert [cell.key for cell in engine.choices] == ["A", "B", "", "C", "D"]
        assert engine.selected_index == 2
        assert not engine.state.is_moving

    def test_shift_from_separator_does_not_swap(self):
        engine = make_engine(self.choices(), cols=3, default=2)
        engine.handle(SHIFT_LEFT)
        assert engine.choices[2].is_separator
        assert engine.selected_index == 1

    def test_swap_separators_option(self):
        engine = make_engine(self.choices(), cols=3, default=1, swap_separators=True)
        engine.handle(SHIFT_RIGHT)
        assert engine.choices[1].is_separator
        assert engine.choices[2].key == "B"


class TestDigitsAndSubmit:
    def test_digit_jumps(self):
        engine = make_engine([str(n) for n in range(1, 10)], cols=3)
        engine.handle(KeyEvent.number(5))
        assert engine.selected_index == 4

    def test_every_digit_in_range(self):
        engine = make_engine(list("ABCDEFG"))
        for n in range(1, 8):
            engine.handle(KeyEvent.number(n))
            assert engine.selected_index == n - 1

    def test_digit_out_of_range_ignored(self):
        engine = make_engine(list("ABC"), default=1)
        engine.handle(KeyEvent.number(4))
        assert engine.selected_index == 1
        engine.handle(KeyEvent.number(0))
        assert engine.selected_index == 1

    def test_unrecognized_event_ignored(self):
        engine = make_engine(list("ABC"), default=1)
        assert engine.handle(None) is None
        assert engine.selected_index == 1

    def test_submit_returns_answers(self):
        engine = make_engine([("Apple", 1), ("Banana", 2)], cols=2)
        engine.handle(SHIFT_RIGHT)
        assert engine.handle(KeyEvent.submit()) == [2, 1]
        assert engine.answered

    def test_events_after_submit_ignored(self):
        engine = make_engine(list("ABCD"), cols=2)
        engine.handle(KeyEvent.submit())
        assert engine.handle(SHIFT_RIGHT) is None
        assert engine.handle(KeyEvent.submit()) is None
        assert engine.choices.as_answers() == list("ABCD")
        assert engine.selected_index == 0
