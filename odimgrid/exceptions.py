"""
odimgrid.exceptions
===================

Custom exceptions used by odimgrid. Every error raised while converting a
file derives from :py:class:`OdimGridError` and aborts the conversion.

.. autosummary::
    :toctree: generated/

    MissingOptionalDependency
    OdimGridError
    SchemaError
    AttributeNotFound
    TypeMismatch
    UnsupportedObject
    UnsupportedProduct
    UnsupportedParameter
    InconsistentLevelModel
    AllocationFailure
    InternalProjectionError
    InvalidProjection

"""


class MissingOptionalDependency(ImportError):
    """ Exception raised when a optional dependency is needed by not found. """
    pass


class OdimGridError(Exception):
    """ Base class of all conversion errors. """
    pass


class SchemaError(OdimGridError):
    """ The file lacks a group or attribute required by the ODIM schema. """
    pass


class AttributeNotFound(OdimGridError):
    """ A requested attribute does not exist. """
    pass


class TypeMismatch(OdimGridError):
    """ An attribute exists but cannot be read as the requested type. """
    pass


class UnsupportedObject(OdimGridError):
    """ The data object kind of the file cannot be converted. """
    pass


class UnsupportedProduct(OdimGridError):
    """ A product string is not part of the ODIM product list. """
    pass


class UnsupportedParameter(OdimGridError):
    """ A (product, quantity) pair has no canonical parameter. """
    pass


class InconsistentLevelModel(OdimGridError):
    """ Datasets disagree on the kind of vertical level. """
    pass


class AllocationFailure(OdimGridError):
    """ The output grid could not be allocated. """
    pass


class InternalProjectionError(OdimGridError):
    """ A polar sample could not be placed on the output grid. """
    pass


class InvalidProjection(OdimGridError):
    """ A projection or area definition cannot be used. """
    pass
