''' Utility tools to draw flows with graphviz'''

import subprocess
import os.path
import os
import sys

from .statusflow import StatusFlowError, RenderError, config
from .flow import StatusFlow


class Rasterizer:
    """
    turns a DOT file into an image file
    """
    def rasterize(self, dot_file, image_file):
        raise NotImplementedError


class GraphvizRasterizer(Rasterizer):
    """
    calls the graphviz command line tool, config["dot"] by default
    """
    def __init__(self, command=None, image_format=None):
        self.command = command
        self.image_format = image_format

    def args(self, dot_file, image_file):
        command = self.command or config["dot"]
        image_format = self.image_format or config["format"]
        return [command, f"-T{image_format}", dot_file, "-o", image_file]

    def rasterize(self, dot_file, image_file):
        args = self.args(dot_file, image_file)
        try:
            subprocess.run(args, check=True, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except subprocess.CalledProcessError as e:
            raise RenderError({
                "function": "generate_graph_image",
                "command": " ".join(args),
                "returncode": e.returncode,
                "message": e.stderr.decode(errors="replace").strip(),
            }) from e
        except OSError as e:
            raise RenderError({"function": "generate_graph_image", "command": " ".join(args), "message": str(e)}) from e


def make_output_dir(path):
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise StatusFlowError({"function": "make_output_dir", "path": path, "message": str(e)}) from e


def write_dot_to_file(dot, filename):
    """
    create (or overwrite) filename with the DOT text
    """
    try:
        with open(filename, "w", encoding="utf-8") as f:
            f.write(dot)
    except OSError as e:
        raise StatusFlowError({"function": "write_dot_to_file", "file": filename, "message": str(e)}) from e


def generate_graph_image(dot_file, image_file, rasterizer=None):
    if rasterizer is None:
        rasterizer = GraphvizRasterizer()
    rasterizer.rasterize(dot_file, image_file)
    return image_file


def output_files(path, name):
    """
    return the pair (dot file, image file) for the base name in path
    """
    return (os.path.join(path, f"{name}.dot"),
            os.path.join(path, f"{name}.{config['format']}"))


def render(flow, path=".", name="status_flow", rasterizer=None, verbose=False):
    """
    write <name>.dot in path and rasterize it
    return the image file name
    the first error stops the process, a .dot file may remain if the rasterizer fails
    """
    if not isinstance(flow, StatusFlow):
        flow = StatusFlow(flow)
    make_output_dir(path)
    (dot_file, image_file) = output_files(path, name)
    write_dot_to_file(flow.to_dot(), dot_file)
    if verbose:
        print (f"dot file written: {dot_file}", file=sys.stderr)
    generate_graph_image(dot_file, image_file, rasterizer)
    if verbose:
        print (f"image file written: {image_file}", file=sys.stderr)
    return image_file
