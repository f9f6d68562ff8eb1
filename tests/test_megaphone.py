from phonebook.megaphone import NOISE, main, shout


def test_no_words_gives_noise():
    assert shout([]) == "* LOUD AND UNBEARABLE FEEDBACK NOISE *"


def test_words_are_joined_and_upper_cased():
    words = ["Damnit", " ! ", "Sorry students, I thought this thing was off."]
    assert shout(words) == "DAMNIT ! SORRY STUDENTS, I THOUGHT THIS THING WAS OFF."


def test_single_sentence():
    assert (
        shout(["shhhhh... I think the students are asleep..."])
        == "SHHHHH... I THINK THE STUDENTS ARE ASLEEP..."
    )


def test_concatenation_invariant():
    words = ["abc", "Def", " x y "]
    assert shout(words) == "".join(shout([word]) for word in words)


def test_non_letters_unchanged():
    assert shout(["123 !?-_"]) == "123 !?-_"


def test_non_ascii_unchanged():
    assert shout(["é"]) == "é"


def test_empty_word_gives_empty_line():
    assert shout([""]) == ""


def test_main_prints_result(capsys):
    assert main(["hi", "there"]) == 0
    assert capsys.readouterr().out == shout(["hi", "there"]) + "\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == NOISE + "\n"