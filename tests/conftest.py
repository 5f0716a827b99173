import pytest


@pytest.fixture(scope="function")
def barrier_fence_fixture():
    MPI = pytest.importorskip("mpi4py.MPI")

    MPI.COMM_WORLD.Barrier()

    yield

    MPI.COMM_WORLD.Barrier()


@pytest.fixture(scope="function")
def comm_split_fixture(request):
    MPI = pytest.importorskip("mpi4py.MPI")

    min_size = request.param

    if MPI.COMM_WORLD.size < min_size:
        pytest.skip(f"Requires at least {min_size} MPI ranks.")

    # Isolate the required number of processors
    if MPI.COMM_WORLD.rank < min_size:
        color = 0
        base_comm = MPI.COMM_WORLD.Split(color)
        return base_comm, True
    else:
        color = 1
        base_comm = MPI.COMM_WORLD.Split(color)
        return base_comm, False
