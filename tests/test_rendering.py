import numpy as np

from ginkgokit.rendering import quad_vertices, skybox_triangles


def test_skybox_shape_and_dtype():
    data = skybox_triangles()
    assert data.shape == (36, 3)
    assert data.dtype == np.float32


def test_skybox_coordinates_are_unit_cube_corners():
    data = skybox_triangles()
    assert set(np.unique(data).tolist()) == {-1.0, 1.0}
    corners = {tuple(row) for row in data.tolist()}
    assert len(corners) == 8


def test_skybox_each_face_lies_in_one_plane():
    faces = skybox_triangles().reshape(6, 6, 3)
    for face in faces:
        constant_axes = [axis for axis in range(3) if np.all(face[:, axis] == face[0, axis])]
        assert len(constant_axes) == 1


def test_skybox_covers_all_six_faces():
    faces = skybox_triangles().reshape(6, 6, 3)
    planes = set()
    for face in faces:
        for axis in range(3):
            if np.all(face[:, axis] == face[0, axis]):
                planes.add((axis, float(face[0, axis])))
    assert len(planes) == 6


def test_quad_layout_from_source():
    quad = quad_vertices()
    assert quad.shape == (4, 5)
    assert quad[0].tolist() == [-1.0, 1.0, 0.0, 0.0, 1.0]
    assert quad[3].tolist() == [1.0, -1.0, 0.0, 1.0, 0.0]


def test_quad_texture_coords_track_positions():
    quad = quad_vertices()
    positions = quad[:, :2]
    uvs = quad[:, 3:]
    assert np.allclose(uvs, (positions + 1.0) / 2.0)
    assert np.all(quad[:, 2] == 0.0)


def test_returned_arrays_are_copies():
    skybox_before = skybox_triangles().tolist()
    mutated = skybox_triangles()
    mutated[:] = 0.0
    assert skybox_triangles().tolist() == skybox_before
    assert skybox_triangles()[0].tolist() == [-1.0, 1.0, -1.0]

    quad_before = quad_vertices().tolist()
    quad = quad_vertices()
    quad[:] = 7.0
    assert quad_vertices().tolist() == quad_before
    assert quad_vertices()[1].tolist() == [-1.0, -1.0, 0.0, 0.0, 0.0]