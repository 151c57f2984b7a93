from PyQt6.QtGui import QColor, QImage

from layer_sketch.logic import DrawingEngine, PointerEvent, PointerKind, ToolType
from layer_sketch.logic.layer import IMAGE_FORMAT

from conftest import HEIGHT, WIDTH, alpha, drag, move, press, release


def opaque_buffer(color="#000000"):
    image = QImage(WIDTH, HEIGHT, IMAGE_FORMAT)
    image.fill(QColor(color))
    return image


def undo_count(engine):
    return engine.history.get_stats(engine.active_layer.id)['undo_count']


# === Brush === #
def test_brush_line_undo_redo_scenario(engine):
    engine.set_tool("brush")
    engine.set_color("#000000")
    engine.set_brush_size(5)

    drag(engine, [(10, 10), (50, 10)])
    assert undo_count(engine) == 1
    drawn = engine.get_active_buffer()
    assert alpha(drawn, 30, 10) == 255
    assert alpha(drawn, 30, 30) == 0

    assert engine.undo()
    assert engine.active_layer.is_empty()

    assert engine.redo()
    assert engine.get_active_buffer() == drawn


def test_brush_paints_while_dragging(engine):
    engine.pointer_down(press(10, 10))
    engine.pointer_move(move(60, 10))
    assert alpha(engine.active_layer.image, 35, 10) == 255
    assert undo_count(engine) == 0


def test_brush_rereads_colour_mid_stroke(engine):
    engine.pointer_down(press(10, 10))
    engine.pointer_move(move(40, 10))
    engine.set_color("#FF6363")
    engine.pointer_move(move(40, 60))
    engine.pointer_up(release(40, 60))

    image = engine.active_layer.image
    assert image.pixelColor(20, 10).name() == "#000000"
    assert image.pixelColor(40, 40).name() == "#ff6363"


def test_press_and_release_commits_an_entry(engine):
    drag(engine, [(10, 10)])
    assert undo_count(engine) == 1


# === Eraser === #
def test_eraser_clears_exactly_its_square(engine):
    engine.set_active_buffer(opaque_buffer())
    engine.set_tool(ToolType.ERASER)
    engine.set_brush_size(10)

    drag(engine, [(50, 50)])

    image = engine.active_layer.image
    for x, y in [(45, 45), (54, 54), (50, 50), (45, 54)]:
        assert alpha(image, x, y) == 0
    for x, y in [(44, 50), (55, 50), (50, 44), (50, 55)]:
        assert alpha(image, x, y) == 255
    assert undo_count(engine) == 1


def test_eraser_is_not_interpolated(engine):
    engine.set_active_buffer(opaque_buffer())
    engine.set_tool("eraser")
    engine.set_brush_size(4)

    drag(engine, [(20, 20), (80, 20)])

    image = engine.active_layer.image
    assert alpha(image, 20, 20) == 0
    assert alpha(image, 80, 20) == 0
    assert alpha(image, 50, 20) == 255


# === Shapes === #
def test_rectangle_preview_then_commit(engine):
    engine.set_tool("rectangle")
    engine.pointer_down(press(0, 0))
    engine.pointer_move(move(100, 50))

    # Preview is visible but the layer is untouched
    assert engine.active_layer.is_empty()
    assert alpha(engine.surface, 50, 49) == 255
    assert undo_count(engine) == 0

    engine.pointer_up(release(100, 50))
    image = engine.active_layer.image
    assert alpha(image, 50, 49) == 255
    assert alpha(image, 99, 25) == 255
    assert alpha(image, 50, 25) == 0
    assert undo_count(engine) == 1


def test_rectangle_commits_at_release_position(engine):
    engine.set_tool("rectangle")
    engine.pointer_down(press(10, 10))
    engine.pointer_move(move(150, 100))
    engine.pointer_up(release(60, 40))

    image = engine.active_layer.image
    assert alpha(image, 60, 25) == 255
    assert alpha(image, 150, 60) == 0


def test_circle_outline(engine):
    engine.set_tool("circle")
    drag(engine, [(60, 60), (90, 60)])

    image = engine.active_layer.image
    assert alpha(image, 89, 60) == 255
    assert alpha(image, 60, 31) == 255
    assert alpha(image, 60, 60) == 0


def test_degenerate_shapes_still_commit(engine):
    for tool in ("rectangle", "circle"):
        engine.set_tool(tool)
        drag(engine, [(30, 30)])
    assert undo_count(engine) == 2


def test_moving_after_release_changes_nothing(engine):
    engine.set_tool("rectangle")
    drag(engine, [(0, 0), (100, 50)])
    committed = engine.get_active_buffer()

    assert not engine.pointer_move(move(150, 110))
    assert not engine.pointer_up(release(150, 110))
    assert engine.get_active_buffer() == committed
    assert undo_count(engine) == 1


def test_shape_uses_settings_from_gesture_start(engine):
    engine.set_tool("rectangle")
    engine.set_color("#3366FF")
    engine.pointer_down(press(10, 10))
    engine.set_color("#FF6363")
    engine.pointer_up(release(80, 80))
    assert engine.active_layer.image.pixelColor(45, 80).name() == "#3366ff"


# === State machine guards === #
def test_events_without_press_are_noops(engine):
    assert not engine.pointer_move(move(10, 10))
    assert not engine.pointer_up(release(10, 10))
    assert not engine.pointer_leave(PointerEvent.synthetic(PointerKind.LEAVE))
    assert engine.active_layer.is_empty()
    assert undo_count(engine) == 0


def test_leave_commits_like_release(engine):
    engine.set_tool("rectangle")
    engine.pointer_down(press(10, 10))
    engine.pointer_move(move(60, 60))
    assert engine.pointer_leave(PointerEvent.mouse(PointerKind.LEAVE, 60, 60))
    assert not engine.is_dragging
    assert undo_count(engine) == 1
    assert alpha(engine.active_layer.image, 35, 60) == 255


def test_second_press_is_ignored(engine):
    engine.pointer_down(press(10, 10))
    assert not engine.pointer_down(press(90, 90))
    assert engine.gesture.anchor.x() == 10


def test_tool_change_mid_gesture_applies_to_next_gesture(engine):
    engine.pointer_down(press(10, 10))
    engine.set_tool("eraser")
    engine.pointer_move(move(60, 10))
    engine.pointer_up(release(60, 10))
    assert alpha(engine.active_layer.image, 35, 10) == 255
    assert engine.settings.tool is ToolType.ERASER


def test_touch_gesture(engine):
    engine.pointer_down(PointerEvent.touch(PointerKind.DOWN, touches=[(10, 20)], changed_touches=[(10, 20)]))
    engine.pointer_move(PointerEvent.touch(PointerKind.MOVE, touches=[(70, 20)]))
    engine.pointer_up(PointerEvent.touch(PointerKind.UP, changed_touches=[(70, 20)]))
    assert alpha(engine.active_layer.image, 40, 20) == 255
    assert undo_count(engine) == 1


# === History through the engine === #
def test_round_trip_law(engine):
    states = []
    for y in (20, 50, 80):
        drag(engine, [(10, y), (150, y)])
        states.append(engine.get_active_buffer())

    for _ in states:
        assert engine.undo()
    assert engine.active_layer.is_empty()
    assert not engine.undo()

    for _ in states:
        assert engine.redo()
    assert engine.get_active_buffer() == states[-1]


def test_new_gesture_after_undo_clears_redo(engine):
    drag(engine, [(10, 10), (50, 10)])
    drag(engine, [(10, 40), (50, 40)])
    engine.undo()
    assert engine.can_redo()

    drag(engine, [(10, 70), (50, 70)])
    before = engine.get_active_buffer()
    assert not engine.redo()
    assert engine.get_active_buffer() == before


def test_undo_redo_on_empty_stacks(engine):
    assert not engine.undo()
    assert not engine.redo()
    assert engine.active_layer.is_empty()


def test_commands_refused_mid_gesture(engine):
    drag(engine, [(10, 10), (50, 10)])
    engine.add_layer()
    engine.pointer_down(press(10, 40))
    assert not engine.undo()
    assert not engine.redo()
    assert not engine.select_layer(1)
    assert not engine.clear_active_layer()
    engine.pointer_up(release(10, 40))
    assert engine.undo()


# === Layers === #
def test_add_layer_keeps_active_index(engine):
    engine.add_layer()
    engine.add_layer()
    assert len(engine.layers) == 3
    assert engine.layers.active_index == 0


def test_select_layer_reloads_surface(engine):
    drag(engine, [(10, 10), (50, 10)])
    engine.add_layer()
    assert engine.select_layer(1)
    assert engine.surface == engine.active_layer.image
    assert alpha(engine.surface, 30, 10) == 0

    assert engine.select_layer(0)
    assert alpha(engine.surface, 30, 10) == 255


def test_select_layer_out_of_range(engine):
    assert not engine.select_layer(5)
    assert not engine.select_layer(-1)
    assert engine.layers.active_index == 0


def test_undo_never_crosses_layers(engine):
    drag(engine, [(10, 10), (50, 10)])
    layer_one = engine.get_active_buffer()
    engine.add_layer()
    engine.select_layer(1)

    assert not engine.undo()
    engine.select_layer(0)
    assert engine.get_active_buffer() == layer_one

    drag(engine, [(10, 60), (50, 60)])
    engine.select_layer(1)
    assert engine.active_layer.is_empty()


def test_clear_is_not_undoable_by_default(engine):
    drag(engine, [(10, 10), (50, 10)])
    assert engine.clear_active_layer()
    assert engine.active_layer.is_empty()
    assert alpha(engine.surface, 30, 10) == 0
    assert undo_count(engine) == 1


def test_clear_can_be_recorded():
    engine = DrawingEngine(WIDTH, HEIGHT, record_clear=True)
    drag(engine, [(10, 10), (50, 10)])
    drawn = engine.get_active_buffer()
    engine.clear_active_layer()
    assert undo_count(engine) == 2
    engine.undo()
    assert engine.get_active_buffer() == drawn


def test_corrupt_buffer_leaves_surface(engine):
    drag(engine, [(10, 10), (50, 10)])
    before = QImage(engine.surface)
    assert not engine.set_active_buffer(b"\x89PNG broken")
    assert engine.surface == before


# === Export & signals === #
def test_export_is_png_of_visible_surface(engine):
    drag(engine, [(10, 10), (50, 10)])
    data = engine.export_active_surface_as_image()
    assert data.startswith(b"\x89PNG")

    exported = QImage()
    assert exported.loadFromData(data)
    assert exported.size() == engine.surface.size()
    assert exported.pixelColor(30, 10).alpha() == 255


def test_signals_fire(engine):
    fired = []
    engine.surface_changed.connect(lambda: fired.append("surface"))
    engine.history_changed.connect(lambda: fired.append("history"))
    engine.layers_changed.connect(lambda: fired.append("layers"))
    engine.settings_changed.connect(lambda: fired.append("settings"))

    engine.set_brush_size(8)
    drag(engine, [(10, 10), (50, 10)])
    engine.add_layer()

    assert {"surface", "history", "layers", "settings"} <= set(fired)


def test_invalid_settings_do_not_signal(engine):
    fired = []
    engine.settings_changed.connect(lambda: fired.append(True))
    assert not engine.set_color("#nothex")
    assert not engine.set_tool("spray")
    assert fired == []


def test_non_finite_brush_size_is_refused(engine):
    fired = []
    engine.settings_changed.connect(lambda: fired.append(True))
    assert not engine.set_brush_size(float('inf'))
    assert not engine.set_brush_size(float('nan'))
    assert engine.settings.brush_size == 5
    assert fired == []


def test_short_and_named_colours_are_refused(engine):
    fired = []
    engine.settings_changed.connect(lambda: fired.append(True))
    for value in ("red", "#fff", "#FF336699"):
        assert not engine.set_color(value)
    assert engine.settings.color.name() == "#000000"
    assert fired == []


def test_brush_polyline_paints_every_segment(engine):
    engine.pointer_down(press(10, 10))
    assert engine.active_layer.is_empty()  # Press alone paints nothing

    engine.pointer_move(move(60, 10))
    engine.pointer_move(move(60, 80))
    engine.pointer_up(release(60, 80))

    image = engine.active_layer.image
    assert alpha(image, 35, 10) == 255
    assert alpha(image, 60, 45) == 255
    assert alpha(image, 35, 45) == 0
