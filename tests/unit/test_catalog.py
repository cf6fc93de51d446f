from kodeshboard.utils.catalog import (
    ANCHOR_TIMES,
    DAILY_STUDY,
    DAILY_TIMES,
    board_labels,
    default_selection,
    merge_selection,
    selected_keys,
)


def test_daily_time_defaults():
    defaults = default_selection(DAILY_TIMES)
    assert len(defaults) == 22
    assert defaults["sunrise_visible"] is True
    assert defaults["alos_hashachar"] is False
    assert default_selection(DAILY_STUDY) == {
        "daf_yomi": True,
        "daf_yomi_yerushalmi": False,
        "halacha_yomit": False,
        "amud_yomi_dirshu": False,
        "rambam_yomi": False,
        "mishna_yomit": False,
        "halacha_daily": False,
    }


def test_anchor_times_are_daily_times():
    keys = {entry.key for entry in DAILY_TIMES}
    assert set(ANCHOR_TIMES) <= keys


def test_merge_selection_stored_values_win_and_unknown_keys_survive():
    merged = merge_selection(DAILY_STUDY, {"daf_yomi": False, "rambam_yomi": True, "future_key": True})
    assert merged["daf_yomi"] is False
    assert merged["rambam_yomi"] is True
    assert merged["future_key"] is True


def test_selected_keys_follow_catalog_order():
    selection = {"mishna_yomit": True, "extra": True, "daf_yomi": True, "rambam_yomi": False}
    assert selected_keys(DAILY_STUDY, selection) == ["daf_yomi", "mishna_yomit", "extra"]


def test_board_labels_use_short_form():
    labels = board_labels(DAILY_TIMES)
    assert labels["sunset_visible"] == "שקיעה"
