import config
import main


def test_build_simulation_seeds_world():
    sim = main.build_simulation(seed=5)
    assert sim.state.life_form_count == config.INITIAL_LIFE_FORMS
    assert sim.state.food_count == config.INITIAL_FOOD_SOURCES
    assert sim.tick == 0


def test_run_headless_returns_history():
    sim = main.build_simulation(seed=5)
    history = main.run_headless(sim, 25)
    assert [s.tick for s in history] == list(range(1, 26))
    assert history[-1].population == sim.state.life_form_count
    assert history[-1].food == sim.state.food_count


def test_hud_stats_keys():
    sim = main.build_simulation(seed=5)
    stats = main.hud_stats(sim)
    assert stats["population"] == config.INITIAL_LIFE_FORMS
    assert stats["avg_energy"] == config.MAX_ENERGY / 2.0
    assert stats["avg_speed"] == 1.0


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.seed is None
    assert args.headless is None
    assert args.log_level == "INFO"


def test_main_headless_exit_code(caplog):
    caplog.set_level("INFO", logger="particle_life")
    rc = main.main(["--headless", "10", "--seed", "11"])
    assert rc == 0
    assert "Simulation ended." in caplog.text


def test_main_allocation_failure(monkeypatch):
    def boom(seed=None):
        raise MemoryError

    monkeypatch.setattr(main, "build_simulation", boom)
    assert main.main(["--headless", "1"]) == 1
