
import argparse, time, copy

from ..streaming.charge_source import SimulatedBuffer, ELECTRIC_CHARGE
from ..hardware.generator_api import MockGenerator, apply_action
from ..hardware.part import Part, resolve_charge_source, resolve_generator
from ..policy.controller_config import ControllerConfig
from ..policy.threshold_controller import ThresholdController, Action
from ..utils.charge import format_percent

DEFAULTS = {
    'ticks': 500,
    'tick_sec': 0.02,
    'log_every': 10,
    'seed': 42,
    'advanced_controls': True,
    'controller': {'automatic': True, 'thresholds': [15, 85], 'debug': False},
    'buffer': {'max_amount': 200.0, 'initial_amount': 100.0,
               'load_per_tick': 1.5, 'load_jitter': 0.5},
    'generator': {'name': 'FuelCell', 'outputs': [ELECTRIC_CHARGE], 'output_per_tick': 3.0},
}

def load_config(path):
    import yaml
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}

def merge_config(cfg):
    out = copy.deepcopy(DEFAULTS)
    for key, val in (cfg or {}).items():
        if isinstance(val, dict) and isinstance(out.get(key), dict):
            out[key].update(val)
        else:
            out[key] = val
    return out

def build_part(cfg, log_fn=print):
    b = cfg['buffer']
    g = cfg['generator']
    buffer = SimulatedBuffer(max_amount=b['max_amount'], initial_amount=b['initial_amount'],
                             load_per_tick=b['load_per_tick'], load_jitter=b['load_jitter'],
                             output_per_tick=g['output_per_tick'], seed=cfg['seed'], log_fn=log_fn)
    gen = MockGenerator(name=g['name'], outputs=g['outputs'], log_fn=log_fn)
    return Part('FuelCellPart', resources=[buffer], modules=[gen]), buffer

def run_session(cfg, log_fn=print):
    """Drive the controller against a simulated part for cfg['ticks'] fixed steps.
    Returns a summary dict (ticks, starts, stops, min_charge, max_charge).
    """
    cfg = merge_config(cfg)
    log = log_fn

    part, buffer = build_part(cfg, log_fn=log)
    source = resolve_charge_source(part)
    generator = resolve_generator(part)

    ctrl_cfg = ControllerConfig.from_dict(cfg['controller'],
                                          advanced_controls_enabled=cfg['advanced_controls'])
    ctrl = ThresholdController.initialize(source, generator, config=ctrl_cfg, log_fn=log)

    if generator is not None:
        generator.connect()

    n_ticks = max(0, int(cfg['ticks']))
    tick_sec = max(0.0, float(cfg['tick_sec']))
    log_every = max(1, int(cfg['log_every']))
    low, high = ctrl.band.as_tuple()
    summary = {'ticks': 0, 'starts': 0, 'stops': 0, 'min_charge': None, 'max_charge': None}

    log(f"[START] ticks={n_ticks} mode={ctrl.mode.value} band=({low:.0f}%, {high:.0f}%) "
        f"advanced={ctrl.config.advanced_controls_enabled}")
    try:
        for i in range(n_ticks):
            buffer.step(generator is not None and generator.is_running())
            action = ctrl.tick()
            if generator is not None:
                apply_action(action, generator)

            if action is Action.START:
                summary['starts'] += 1
            elif action is Action.STOP:
                summary['stops'] += 1
            charge = ctrl.current_charge
            if charge is not None:
                if summary['min_charge'] is None or charge < summary['min_charge']:
                    summary['min_charge'] = charge
                if summary['max_charge'] is None or charge > summary['max_charge']:
                    summary['max_charge'] = charge
            summary['ticks'] = i + 1

            if action is not Action.NOOP:
                log(f"[CTRL] tick={i} action={action.value} charge={ctrl.charge_display}")
            elif i % log_every == 0:
                running = generator is not None and generator.is_running()
                log(f"[TICK] {i} charge={ctrl.charge_display} generator={'on' if running else 'off'}")

            if tick_sec > 0:
                time.sleep(tick_sec)
    except KeyboardInterrupt:
        log("[STOP] Interrupted by user.")
    finally:
        if generator is not None:
            generator.request_stop()
            generator.disconnect()
        log(f"[END] ticks={summary['ticks']} starts={summary['starts']} stops={summary['stops']} "
            f"min={format_percent(summary['min_charge'])} max={format_percent(summary['max_charge'])}")
    return summary

def main(argv=None):
    p = argparse.ArgumentParser(description="Automatic fuel cell controller, simulated host loop.")
    p.add_argument('--config', default='configs/config.yaml')
    p.add_argument('--mode', choices=['automatic', 'manual'], default=None)
    p.add_argument('--ticks', type=int, default=None)
    p.add_argument('--seed', type=int, default=None)
    args = p.parse_args(argv)

    cfg = merge_config(load_config(args.config))
    if args.mode is not None:
        cfg['controller']['automatic'] = args.mode == 'automatic'
    if args.ticks is not None:
        cfg['ticks'] = args.ticks
    if args.seed is not None:
        cfg['seed'] = args.seed

    run_session(cfg)

if __name__ == '__main__':
    main()
