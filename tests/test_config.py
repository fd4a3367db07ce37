import warnings


def test_only_on_event_deprecation_is_silenced():
    with warnings.catch_warnings(record=True) as caught:
        warnings.warn("\n        on_event is deprecated, use lifespan event handlers instead.",
                      DeprecationWarning)
        warnings.warn("some other helper is deprecated", DeprecationWarning)

    assert [str(w.message) for w in caught] == ["some other helper is deprecated"]
