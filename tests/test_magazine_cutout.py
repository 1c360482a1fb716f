from katas.magazine_cutout import can_construct_note


def test_magazine_has_fewer_words_available_than_needed():
    magazine = "two times three is not four".split()
    note = "two times two is four".split()
    assert can_construct_note(magazine, note) is False


def test_returns_true_for_good_input():
    magazine = (
        "The metro orchestra unveiled its new grand piano today. Its donor paraphrased "
        'Nathn Hale: "I only regret that I have but one to give "'
    ).split()
    note = "give one grand today.".split()
    assert can_construct_note(magazine, note) is True


def test_returns_false_for_bad_input():
    magazine = "I've got a lovely bunch of coconuts.".split()
    note = "I've got som coconuts".split()
    assert can_construct_note(magazine, note) is False


def test_case_sensitivity():
    assert (
        can_construct_note("i've got some lovely coconuts".split(), "I've got some coconuts".split())
        is False
    )
    assert (
        can_construct_note("I've got some lovely coconuts".split(), "i've got some coconuts".split())
        is False
    )


def test_magazine_has_more_words_available_than_needed():
    magazine = "Enough is enough when enough is enough".split()
    note = "enough is enough".split()
    assert can_construct_note(magazine, note) is True


def test_magazine_has_one_good_word_many_times_but_still_cant_construct():
    assert can_construct_note("A A A".split(), "A nice day".split()) is False


def test_empty_note_is_always_possible():
    assert can_construct_note([], []) is True