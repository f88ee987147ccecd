"""Basic tests for the lifecubes package."""

from lifecubes import GenerationEngine, Grid, PatternLibrary, Simulation, SimulationConfig, initialize


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10)
    assert grid.size == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_engine_creation():
    """Test basic engine creation."""
    grid = Grid(5)
    engine = GenerationEngine(grid)
    assert engine.population == 0
    assert engine.current_generation() == 1

    grid.set_cell(2, 2, True)
    assert engine.population == 1


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5)
    engine = GenerationEngine(grid)

    # Vertical line
    grid.set_cell(1, 2, True)
    grid.set_cell(2, 2, True)
    grid.set_cell(3, 2, True)

    result = engine.tick()
    assert result.generation == 2
    assert result.alive_cells == [(2, 1), (2, 2), (2, 3)]

    result = engine.tick()
    assert result.generation == 3
    assert result.alive_cells == [(1, 2), (2, 2), (3, 2)]


def test_initialize_and_simulate():
    """Test the top-level helpers work together."""
    grid = initialize(8, 0.5, seed=1)
    assert grid.size == 8

    simulation = Simulation(SimulationConfig(pacing="free", start_delay=0.0), grid=grid)
    results = simulation.run(frames=4, dt=0.1)
    assert [r.generation for r in results] == [2, 3, 4]
