import pytest
from geometry3d import ORIGIN3D, X_VECTOR3D, Y_VECTOR3D, Z_VECTOR3D, NULL_HOOKS, Point3d, Vector3d, install_hooks


@pytest.fixture
def origin():
    return ORIGIN3D


@pytest.fixture
def x_axis():
    return X_VECTOR3D


@pytest.fixture
def y_axis():
    return Y_VECTOR3D


@pytest.fixture
def z_axis():
    return Z_VECTOR3D


@pytest.fixture
def p() -> Point3d:
    return Point3d(1.0, 2.0, 3.0)


@pytest.fixture
def q() -> Point3d:
    return Point3d(4.0, -6.0, 15.0)


@pytest.fixture
def u() -> Vector3d:
    return Vector3d(1.0, 2.0, 3.0)


@pytest.fixture
def v() -> Vector3d:
    return Vector3d(4.0, 5.0, 6.0)


@pytest.fixture(autouse=True)
def reset_hooks():
    """Every test starts and ends with the no-op hooks installed."""
    install_hooks(NULL_HOOKS)
    yield
    install_hooks(NULL_HOOKS)
