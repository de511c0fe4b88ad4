import sys
import os.path
sys.path.insert(0,os.path.abspath(os.path.join( os.path.dirname(__file__), "../"))) # Use local statusflow lib

from statusflow import StatusFlow, render

print ("---- build a flow from a file ----")
flow = StatusFlow(os.path.join(os.path.dirname(__file__), "order.json"))

print (f"|statuses| = {len(flow)}")
print (f"nodes = {flow.nodes()}")
print ("---- sucs ----")
print (flow.sucs["Paid"])

print ("---- DOT output of a flow ----")
print (flow.to_dot())

print ("---- compared with the sample flow ----")
print (flow.edge_diff(StatusFlow.sample()))

print (render(flow, "out", "order"))
