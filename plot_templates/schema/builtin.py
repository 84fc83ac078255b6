"""Built-in attribute schema — the default PlotSchema used by make_template.

Covers the common trace types (scatter, bar, pie, heatmap) and the layout
attributes that usually carry house style: fonts, colors, margins, legend,
cartesian axes, annotations, and shapes.

Roles follow the convention:
    style  — purely presentational, captured into templates
    info   — content or figure-specific (title text, ranges, sizes)
    data   — data payloads (data arrays are also marked by valType)
"""

from .plot_schema import PlotSchema


def _style(val_type: str, array_ok: bool = False) -> dict:
    attr = {"valType": val_type, "role": "style"}
    if array_ok:
        attr["arrayOk"] = True
    return attr


def _info(val_type: str, array_ok: bool = False) -> dict:
    attr = {"valType": val_type, "role": "info"}
    if array_ok:
        attr["arrayOk"] = True
    return attr


def _data_array() -> dict:
    return {"valType": "data_array", "role": "data"}


# Shared attribute groups
def _font(array_ok: bool = False) -> dict:
    return {
        "family": _style("string", array_ok),
        "size": _style("number", array_ok),
        "color": _style("color", array_ok),
    }


def _line() -> dict:
    return {
        "color": _style("color"),
        "width": _style("number"),
        "dash": _style("string"),
    }


def _marker_line() -> dict:
    return {
        "color": _style("color", array_ok=True),
        "width": _style("number", array_ok=True),
    }


def _title() -> dict:
    return {
        "text": _info("string"),
        "font": _font(),
        "x": _style("number"),
        "xanchor": _style("enumerated"),
    }


def _axis() -> dict:
    return {
        "_isSubplotObj": True,
        "title": {
            "text": _info("string"),
            "font": _font(),
            "standoff": _style("number"),
        },
        "type": _info("enumerated"),
        "range": _info("info_array"),
        "autorange": _style("enumerated"),
        "color": _style("color"),
        "showgrid": _style("boolean"),
        "gridcolor": _style("color"),
        "gridwidth": _style("number"),
        "zeroline": _style("boolean"),
        "zerolinecolor": _style("color"),
        "zerolinewidth": _style("number"),
        "showline": _style("boolean"),
        "linecolor": _style("color"),
        "linewidth": _style("number"),
        "mirror": _style("enumerated"),
        "ticks": _style("enumerated"),
        "ticklen": _style("number"),
        "tickcolor": _style("color"),
        "tickfont": _font(),
        "tickformat": _style("string"),
        "tickvals": _data_array(),
        "ticktext": _data_array(),
    }


# ---------------------------------------------------------------------------
# Traces
# ---------------------------------------------------------------------------

def _trace_common() -> dict:
    return {
        "type": _info("enumerated"),
        "name": _info("string"),
        "uid": _info("string"),
        "visible": _info("enumerated"),
        "showlegend": _info("boolean"),
        "legendgroup": _info("string"),
        "opacity": _style("number"),
        "hoverinfo": _info("flaglist", array_ok=True),
        "hoverlabel": {
            "bgcolor": _style("color", array_ok=True),
            "bordercolor": _style("color", array_ok=True),
            "font": _font(array_ok=True),
        },
        "customdata": _data_array(),
        "ids": _data_array(),
    }


def _scatter() -> dict:
    return {
        "x": _data_array(),
        "y": _data_array(),
        "text": _info("string", array_ok=True),
        "hovertext": _info("string", array_ok=True),
        "hovertemplate": _info("string", array_ok=True),
        "mode": _style("flaglist"),
        "line": {**_line(), "shape": _style("enumerated")},
        "connectgaps": _info("boolean"),
        "fill": _style("enumerated"),
        "fillcolor": _style("color"),
        "marker": {
            "color": _style("color", array_ok=True),
            "size": _style("number", array_ok=True),
            "symbol": _style("enumerated", array_ok=True),
            "opacity": _style("number", array_ok=True),
            "colorscale": _style("colorscale"),
            "line": _marker_line(),
        },
        "textposition": _style("enumerated", array_ok=True),
        "textfont": _font(array_ok=True),
    }


def _bar() -> dict:
    return {
        "x": _data_array(),
        "y": _data_array(),
        "text": _info("string", array_ok=True),
        "hovertemplate": _info("string", array_ok=True),
        "orientation": _info("enumerated"),
        "width": _info("number", array_ok=True),
        "offset": _info("number", array_ok=True),
        "marker": {
            "color": _style("color", array_ok=True),
            "opacity": _style("number", array_ok=True),
            "colorscale": _style("colorscale"),
            "line": _marker_line(),
        },
        "textposition": _style("enumerated", array_ok=True),
        "textfont": _font(array_ok=True),
    }


def _pie() -> dict:
    return {
        "labels": _data_array(),
        "values": _data_array(),
        "text": _data_array(),
        "hole": _style("number"),
        "sort": _style("boolean"),
        "direction": _style("enumerated"),
        "rotation": _style("number"),
        "textinfo": _style("flaglist"),
        "textposition": _style("enumerated", array_ok=True),
        "textfont": _font(array_ok=True),
        "marker": {
            "colors": _data_array(),
            "line": _marker_line(),
        },
    }


def _heatmap() -> dict:
    return {
        "x": _data_array(),
        "y": _data_array(),
        "z": _data_array(),
        "zmin": _info("number"),
        "zmax": _info("number"),
        "colorscale": _style("colorscale"),
        "reversescale": _style("boolean"),
        "showscale": _info("boolean"),
        "xgap": _style("number"),
        "ygap": _style("number"),
    }


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def _annotations() -> dict:
    return {
        "_isLinkedToArray": "annotation",
        "name": _style("string"),
        "templateitemname": _info("string"),
        "visible": _info("boolean"),
        "text": _info("string"),
        "x": _info("any"),
        "y": _info("any"),
        "xref": _info("enumerated"),
        "yref": _info("enumerated"),
        "showarrow": _style("boolean"),
        "arrowhead": _style("integer"),
        "arrowcolor": _style("color"),
        "arrowwidth": _style("number"),
        "font": _font(),
        "align": _style("enumerated"),
        "bgcolor": _style("color"),
        "bordercolor": _style("color"),
        "borderwidth": _style("number"),
        "opacity": _style("number"),
    }


def _shapes() -> dict:
    return {
        "_isLinkedToArray": "shape",
        "name": _style("string"),
        "templateitemname": _info("string"),
        "visible": _info("boolean"),
        "type": _info("enumerated"),
        "x0": _info("any"),
        "x1": _info("any"),
        "y0": _info("any"),
        "y1": _info("any"),
        "layer": _info("enumerated"),
        "line": _line(),
        "fillcolor": _style("color"),
        "opacity": _style("number"),
    }


def _layout() -> dict:
    return {
        "template": _info("any"),
        "font": _font(),
        "title": _title(),
        "colorway": _style("colorlist"),
        "paper_bgcolor": _style("color"),
        "plot_bgcolor": _style("color"),
        "width": _info("number"),
        "height": _info("number"),
        "autosize": _info("boolean"),
        "margin": {
            "l": _style("number"),
            "r": _style("number"),
            "t": _style("number"),
            "b": _style("number"),
            "pad": _style("number"),
        },
        "showlegend": _info("boolean"),
        "legend": {
            "bgcolor": _style("color"),
            "bordercolor": _style("color"),
            "borderwidth": _style("number"),
            "font": _font(),
            "orientation": _style("enumerated"),
            "x": _info("number"),
            "y": _info("number"),
        },
        "hovermode": _info("enumerated"),
        "hoverlabel": {
            "bgcolor": _style("color"),
            "bordercolor": _style("color"),
            "font": _font(),
        },
        "barmode": _info("enumerated"),
        "bargap": _style("number"),
        "bargroupgap": _style("number"),
        "xaxis": _axis(),
        "yaxis": _axis(),
        "annotations": _annotations(),
        "shapes": _shapes(),
    }


def build_default_plot_schema() -> PlotSchema:
    """Build the built-in attribute schema."""
    return PlotSchema(
        traces={
            "scatter": _scatter(),
            "bar": _bar(),
            "pie": _pie(),
            "heatmap": _heatmap(),
        },
        layout_attributes=_layout(),
        trace_common=_trace_common(),
        default_trace_type="scatter",
    )
