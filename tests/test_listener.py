from evilpixie.listener import ProjectListener


class _Recorder(ProjectListener):
    def __init__(self):
        self.events = []

    def on_damaged(self, target, frame, dmg):
        self.events.append(("damaged", target, frame, dmg))

    def on_modified_flag_changed(self, modified):
        self.events.append(("modified", modified))


def test_base_hooks_return_none():
    listener = ProjectListener()
    results = [
        listener.on_damaged("layer", 0, None),
        listener.on_palette_changed("layer", 0, 3, (1, 2, 3)),
        listener.on_palette_replaced("layer", 0),
        listener.on_ranges_blatted("layer", 0),
        listener.on_modified_flag_changed(True),
        listener.on_frames_added("layer", 0, 2),
        listener.on_frames_removed("layer", 0, 2),
        listener.on_frames_blatted("layer", 0, 2),
    ]
    assert results == [None] * 8


def test_overridden_hooks_are_called_and_others_are_noops():
    rec = _Recorder()
    rec.on_damaged("layer", 2, "box")
    added = ProjectListener.on_frames_added(rec, "layer", 0, 1)
    replaced = ProjectListener.on_palette_replaced(rec, "layer", 0)
    rec.on_modified_flag_changed(False)
    assert (added, replaced) == (None, None)
    assert rec.events == [("damaged", "layer", 2, "box"), ("modified", False)]