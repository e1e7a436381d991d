"""
This package contains the decoders for responses received from HEOS devices.

Sub-packages handle specific parts of a response:

- ``response``: The JSON envelope and the typed ``Response`` model.
- ``command``: The ``group/command`` path of the ``heos`` object.
- ``message``: The ``key=value&...`` message string of the ``heos`` object.
- ``payload``: Normalisation of payload records to string values.
"""
