"""
statusflow module: anything you want to talk about status flows
A flow is an ordered list of statuses, each one naming the statuses it may move to.
Flows are built from python objects, JSON strings, JSON files or an input stream.
"""
import os.path
import sys
import json
import numpy as np

from statusflow.statusflow import StatusFlowError, config
from statusflow import utils

''' interfaces'''
class Status():
    """
    a state record: a name and the ordered list of its successors' names
    names are used as they are: no trimming, no case folding
    """
    def __init__(self, name="", next_status=None):
        if isinstance(next_status, (str, bytes)):
            raise StatusFlowError(f"next_status of {name!r} must be a list of names, not {type(next_status).__name__}")
        self.name = name
        self.next_status = list(next_status) if next_status else []

    def __eq__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self.name == other.name and self.next_status == other.next_status

    def __repr__(self):
        return f"Status({self.name!r}, {self.next_status!r})"

    @staticmethod
    def _field(obj, key):
        """
        exact key first, then a case-insensitive match
        """
        if key in obj:
            return obj[key]
        for k, v in obj.items():
            if k.lower() == key.lower():
                return v
        return None

    @classmethod
    def from_json(cls, obj):
        """
        build a Status from a decoded JSON object {"Name": ..., "NextStatus": [...]}
        missing or null fields get their empty value, unknown fields are ignored
        a null object is a Status with an empty name and no successor
        """
        if obj is None:
            return cls()
        if not isinstance(obj, dict):
            raise StatusFlowError({"function": "decode_input", "message": f"expected an object, got {obj!r}"})
        name = Status._field(obj, "Name")
        if name is None:
            name = ""
        elif not isinstance(name, str):
            raise StatusFlowError({"function": "decode_input", "message": f"Name must be a string, got {name!r}"})
        nexts = Status._field(obj, "NextStatus")
        if nexts is None:
            nexts = []
        elif not isinstance(nexts, list) or not all(n is None or isinstance(n, str) for n in nexts):
            raise StatusFlowError({"function": "decode_input", "message": f"NextStatus must be a list of strings, got {nexts!r}"})
        return cls(name, ["" if n is None else n for n in nexts])

    def json_data(self):
        return {"Name": self.name, "NextStatus": list(self.next_status)}


class StatusFlow():
    """
    an ordered list of Status

    Param data: either
        - None: return an empty flow
        - a StatusFlow: return a copy
        - a list of Status or of JSON objects
        - a json formatted string or bytes
        - a file name containing json
    """
    def __init__(self, data=None):
        if data is None:
            self.statuses = []
        elif isinstance(data, StatusFlow):
            self.statuses = [Status(s.name, s.next_status) for s in data]
        elif isinstance(data, list):
            self.statuses = StatusFlow._from_json(data)
        elif isinstance(data, (str, bytes)):
            if isinstance(data, str) and os.path.isfile(data):
                try:
                    with open(data, encoding="utf-8") as f:
                        data = f.read()
                except OSError as e:
                    raise StatusFlowError({"function": "read_input", "file": data, "message": str(e)})
            self.statuses = StatusFlow._decode(data)
        else:
            raise StatusFlowError(f"Cannot build StatusFlow with data of type {type(data)}")

    @staticmethod
    def _decode(text):
        try:
            data_json = json.loads(text)
        except (json.decoder.JSONDecodeError, UnicodeDecodeError) as e:
            raise StatusFlowError({"function": "decode_input", "message": str(e)})
        return StatusFlow._from_json(data_json)

    @staticmethod
    def _from_json(data_json):
        # a JSON null is an empty flow
        if data_json is None:
            return []
        if not isinstance(data_json, list):
            raise StatusFlowError({"function": "decode_input", "message": f"expected a list of statuses, got {type(data_json).__name__}"})
        return [s if isinstance(s, Status) else Status.from_json(s) for s in data_json]

    @classmethod
    def from_stdin(cls, stream=None):
        """
        read a whole stream (the bytes of stdin by default) and decode it
        bytes must be UTF-8
        """
        stream = sys.stdin.buffer if stream is None else stream
        try:
            data = stream.read()
        except UnicodeDecodeError as e:
            # text streams decode while reading
            raise StatusFlowError({"function": "decode_input", "message": str(e)})
        except OSError as e:
            raise StatusFlowError({"function": "read_input", "message": str(e)})
        flow = cls()
        flow.statuses = StatusFlow._decode(data)
        return flow

    @classmethod
    def sample(cls):
        return cls([
            Status("Start", ["In Progress"]),
            Status("In Progress", ["Completed", "Failed"]),
            Status("Completed", []),
            Status("Failed", []),
        ])

    def __len__(self):
        """
        return the number of statuses in self, duplicates included
        """
        return len(self.statuses)

    def __getitem__(self, i):
        return self.statuses[i]

    def __iter__(self):
        return iter(self.statuses)

    def append(self, status):
        self.statuses.append(status)

    @property
    def sucs(self):
        """
        successors of each name, statuses sharing a name are merged
        """
        d = dict()
        for s in self.statuses:
            d.setdefault(s.name, [])
            for n in s.next_status:
                utils.map_append(d, s.name, n)
        return d

    def nodes(self):
        """
        distinct names, in the order they are first met
        """
        return utils.unique(n for s in self.statuses for n in [s.name] + s.next_status)

    def triples(self):
        """
        return the list of edges presented as pairs (n, m) with n -> m
        """
        return [(s.name, n) for s in self.statuses for n in s.next_status]

    edges = triples

    def json_data(self):
        return [s.json_data() for s in self.statuses]

    def __str__(self):
        return json.dumps(self.json_data(), indent=2)

    def to_dot(self):
        """
        return a string in dot/graphviz format
        """
        return generate_dot(self.statuses)

    def adjacency(self) -> np.ndarray:
        """
        edge counts, rows and columns follow self.nodes()
        """
        index = {n: i for i, n in enumerate(self.nodes())}
        m = np.zeros((len(index), len(index)), dtype=int)
        for (n, s) in self.triples():
            m[index[n], index[s]] += 1
        return m

    def edge_diff(self, other) -> np.ndarray:
        """
        edge difference between two flows
        """
        E1 = set(self.triples())
        E2 = set(other.triples())
        return np.array([len(E1 & E2), len(E1 - E2), len(E2 - E1)])


def generate_dot(statuses):
    """
    DOT text of a list of Status, laid out following config["rankdir"]
    each name is declared once, when first met; every transition gives an edge
    names are not escaped
    """
    dot = "digraph G {\n"
    dot += f"rankdir={config['rankdir']};\n"
    dot += f"node [shape={config['shape']}, style={config['style']}, color={config['color']}, fontname={config['fontname']}];\n"
    visited = dict()
    for status in statuses:
        if status.name not in visited:
            dot += f'  "{status.name}";\n'
            visited[status.name] = None
        for suc in status.next_status:
            if suc not in visited:
                dot += f'  "{suc}";\n'
                visited[suc] = None
            dot += f'  "{status.name}" -> "{suc}";\n'
    dot += "}\n"
    return dot
