"""
statusflow python library
Draw state transition flows with graphviz
"""
from .statusflow import StatusFlowError, RenderError, set_config, get_config, reset_config
from .flow import Status, StatusFlow, generate_dot
from .render import Rasterizer, GraphvizRasterizer, write_dot_to_file, generate_graph_image, render
