"""
Utility functions related to creating scales.
"""
from .. import _conf
from .._models import transforms, scales


def _create_transform(scale_type):
    if scale_type == _conf.SCALE_BIEXP:
        xform = transforms.LogicleTransform(**_conf.logicle_defaults)
    elif scale_type == _conf.SCALE_ARCSIN:
        xform = transforms.ArcsinhTransform()
    else:
        raise NotImplementedError("Scale type %s is not driven by a transform." % scale_type)

    return xform


def create_scale(scale_type, extent, data_range=None, transform=None):
    """
    Create a scale for a single axis from a scale type tag.

    The scale types available and how they use the arguments:

    - SCALE_LINEAR: LinearScale, domain is data_range
    - SCALE_LOG: LogScale (natural log), domain is data_range
    - SCALE_BIEXP: TransformScale over a LogicleTransform, the transform
      determines the domain. If no transform is given, one is created from
      the default Logicle parameters (t: 262000, w: 0.4, m: 4.5, a: 0.7).
    - SCALE_ARCSIN: TransformScale over an ArcsinhTransform, domain is the
      fixed arcsinh domain (-120, 11000).

    :param scale_type: one of SCALE_LINEAR, SCALE_LOG, SCALE_BIEXP, SCALE_ARCSIN
    :param extent: 2-item sequence of pixel endpoints for the scale range
    :param data_range: 2-item sequence of data endpoints, required for
        linear & log scales, ignored by transform driven scales
    :param transform: optional LogicleTransform instance for SCALE_BIEXP
    :return: scale instance
    """
    if scale_type not in _conf.scale_types:
        raise NotImplementedError("Scale type %s is not supported." % scale_type)

    if scale_type in (_conf.SCALE_LINEAR, _conf.SCALE_LOG):
        if transform is not None:
            raise ValueError("A transform cannot be used with scale type %s" % scale_type)
        if data_range is None:
            raise ValueError("Scale type %s requires a data range" % scale_type)

        if scale_type == _conf.SCALE_LINEAR:
            scale = scales.LinearScale(domain=data_range, range=extent)
        else:
            scale = scales.LogScale(domain=data_range, range=extent, base=_conf.log_base_default)
    elif scale_type == _conf.SCALE_BIEXP:
        if transform is None:
            transform = _create_transform(scale_type)
        elif not isinstance(transform, transforms.LogicleTransform):
            raise TypeError(
                "Scale type %s requires a LogicleTransform, received %s" % (scale_type, type(transform).__name__)
            )

        scale = scales.TransformScale(transform, range=extent)
    else:
        if transform is not None:
            raise ValueError("Scale type %s uses a fixed transform" % scale_type)

        scale = scales.TransformScale(_create_transform(scale_type), range=extent)

    return scale


def get_scales(options):
    """
    Create the x & y scales for a 2-D plot.

    The x scale maps onto [0, width] and the y scale onto [height, 0], so
    larger y values are drawn closer to the top of the plot.

    The options dictionary must contain the keys:

    - selected_x_scale, selected_y_scale: scale type tags
    - width, height: plot size in pixels
    - x_range, y_range: data ranges, needed for linear & log scales

    Optionally, x_transform & y_transform can specify a LogicleTransform
    instance for a SCALE_BIEXP axis.

    :param options: dictionary of plot options
    :return: dictionary with keys 'x_scale' & 'y_scale'
    """
    x_scale = create_scale(
        options['selected_x_scale'],
        (0, options['width']),
        data_range=options.get('x_range'),
        transform=options.get('x_transform')
    )
    y_scale = create_scale(
        options['selected_y_scale'],
        (options['height'], 0),
        data_range=options.get('y_range'),
        transform=options.get('y_transform')
    )

    return {'x_scale': x_scale, 'y_scale': y_scale}


def get_plot_image_key(options):
    """
    Create a string key identifying a rendered plot image by the machine type
    and the parameter indices & scale types of both axes.

    :param options: dictionary of plot options with the keys machine_type,
        selected_x_parameter_index, selected_x_scale, selected_y_parameter_index,
        and selected_y_scale
    :return: string key, e.g. 'FLORESCENT_3_SCALE_BIEXP-4_SCALE_LINEAR'
    """
    return '{}_{}_{}-{}_{}'.format(
        options['machine_type'],
        options['selected_x_parameter_index'],
        options['selected_x_scale'],
        options['selected_y_parameter_index'],
        options['selected_y_scale']
    )
