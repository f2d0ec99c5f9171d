"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
import logging

import click
import numpy as np

from geoLOSModel.geoConfig import cgeoCfg
from geoLOSModel.geoCore.constants import MATH
from geoLOSModel.geoErrorsWarning.geoErrors import LOSModelConfigError
from geoLOSModel.geoLOSModelLogger import GeoLOSModelLog
from geoLOSModel.geoSpacecraft.attitude import find_attitude_at_time, separate_jitter
from geoLOSModel.utils.misc import attitude_to_dict, load_attitude_file, write_dict_as_json


def validatePositive(ctx, param, value):
    if value is not None and not value > 0:
        raise click.BadParameter("value must be positive")
    return value


@click.group(context_settings=dict(help_option_names=["-help", "-h"]))
@click.option('--log_dir', type=click.Path(file_okay=False), default=None, help="Directory of the log file.")
@click.option('--debug', is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx, log_dir, debug):
    ctx.ensure_object(dict)
    ctx.obj['log'] = GeoLOSModelLog('geoLOSModel', log_dir, level=logging.DEBUG if debug else logging.INFO)


@cli.command()
@click.argument('attitude_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('output_prefix', type=click.Path())
@click.option('--cutoff', type=float, default=None, callback=validatePositive,
              help="Low pass cutoff frequency (Hz). Defaults to the calibration parameters.")
@click.option('--start', type=float, default=None, help="Start of the bias window (s from epoch).")
@click.option('--stop', type=float, default=None, help="Stop of the bias window (s from epoch).")
@click.option('--calibration', type=click.Path(exists=True, dir_okay=False), default=None,
              help="Calibration parameter file (YAML).")
def jitter(attitude_file, output_prefix, cutoff, start, stop, calibration):
    """Split an attitude sequence into low frequency attitude and high frequency jitter."""
    cfg = cgeoCfg(calibration)
    cutoff = cutoff or cfg.cutoffFrequency
    if cutoff is None:
        raise click.UsageError("no cutoff frequency given and none in the calibration parameters")
    try:
        att = load_attitude_file(attitude_file)
        times = att.sample_records['seconds_from_epoch'] if att.sample_count else [0.0]
        start = times[0] if start is None else start
        stop = times[-1] if stop is None else stop
        low_att, jitter_att = separate_jitter(att, cutoff, start, stop, **cfg.filter_kwargs())
    except LOSModelConfigError as e:
        raise click.ClickException(str(e))

    write_dict_as_json(attitude_to_dict(low_att), output_prefix + '_low.json')
    write_dict_as_json(attitude_to_dict(jitter_att), output_prefix + '_jitter.json')
    click.echo(f"{output_prefix}_low.json")
    click.echo(f"{output_prefix}_jitter.json")


ANGLE_UNITS = {'rad': 1.0, 'deg': MATH.DEGREES_PER_RADIAN, 'arcsec': 1.0 / MATH.ARCSEC_TO_RADIAN}


@cli.command('attitude-at')
@click.argument('attitude_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('att_time', type=float)
@click.option('--units', type=click.Choice(list(ANGLE_UNITS)), default='rad', show_default=True,
              help="Units of the printed angles.")
def attitude_at(attitude_file, att_time, units):
    """Print the precision roll, pitch and yaw at ATT_TIME seconds from the attitude epoch."""
    try:
        att = load_attitude_file(attitude_file)
        roll, pitch, yaw = np.array(find_attitude_at_time(att, att_time)) * ANGLE_UNITS[units]
    except LOSModelConfigError as e:
        raise click.ClickException(str(e))
    click.echo(f"{roll:.12e} {pitch:.12e} {yaw:.12e}")


if __name__ == '__main__':
    cli()
