import pytest

from cardquest.model import (
    DEFAULT_MODEL_NAME,
    DrawCall,
    Model,
    create_model,
    create_model_from_obj,
)
from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import Vector3


def test_create_model_uses_default_name():
    model = create_model()
    assert model.name == DEFAULT_MODEL_NAME
    assert model.draw_calls == []


def test_create_model_from_obj_keeps_name_and_smoothing():
    model = create_model_from_obj("float_Body", True)
    assert model.name == "float_Body"
    assert model.smoothing is True


def test_create_model_from_obj_rejects_empty_name():
    with pytest.raises(ValueError):
        create_model_from_obj("", False)


def test_draw_records_matrices_and_texture():
    model = create_model_from_obj("stage", True)
    wt = WorldTransform(translation=Vector3(1.0, 2.0, 3.0))
    wt.update_matrix()
    vp = ViewProjection()
    vp.initialize()
    call = model.draw(wt, vp, 7)
    assert isinstance(call, DrawCall)
    assert model.draw_calls == [call]
    assert call.model_name == "stage"
    assert call.texture_handle == 7
    assert call.world_matrix.values() == wt.mat_world.values()
    assert call.view_matrix.values() == vp.mat_view.values()
    assert call.projection_matrix.values() == vp.mat_projection.values()


def test_draw_snapshots_matrix():
    model = Model()
    wt = WorldTransform(translation=Vector3(1.0, 0.0, 0.0))
    wt.update_matrix()
    call = model.draw(wt, ViewProjection())
    wt.translation = Vector3(5.0, 0.0, 0.0)
    wt.update_matrix()
    assert call.world_matrix.m[3][0] == 1.0
    assert call.texture_handle is None


def test_clear_forgets_calls():
    model = Model()
    wt = WorldTransform()
    vp = ViewProjection()
    model.draw(wt, vp)
    model.draw(wt, vp)
    assert len(model.draw_calls) == 2
    model.clear()
    assert model.draw_calls == []