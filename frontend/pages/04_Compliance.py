# frontend/pages/04_Compliance.py
from resource_page import render_resource_page

render_resource_page("compliance")
