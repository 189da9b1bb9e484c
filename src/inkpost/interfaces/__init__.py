"""Interfaces (application boundary) for INKPOST.

Defines framework-free application contracts: repository ABCs, the unit of
work, the clock, and the small record types shared by the service layer and
adapters. Business rules stay out of this package.

Dependency rule: may import `inkpost.domain` only. It may be imported by
`inkpost.service_layer`, `inkpost.adapters`, and `inkpost.bootstrap`.
"""
