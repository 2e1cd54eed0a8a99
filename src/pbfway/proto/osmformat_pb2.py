"""Protobuf message classes for the OSM PBF osmformat schema.

Mirrors osmformat.proto in this directory. The file descriptor is built
with descriptor_pb2 and registered in a private descriptor pool, so the
package does not need protoc at build time and does not clash with other
osmformat modules in the default pool.
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_F = descriptor_pb2.FieldDescriptorProto
_PACKED = descriptor_pb2.FieldOptions(packed=True)


def _field(
    name: str,
    number: int,
    field_type: int,
    label: int = _F.LABEL_OPTIONAL,
    **kwargs: object,
) -> descriptor_pb2.FieldDescriptorProto:
    return _F(name=name, number=number, type=field_type, label=label, **kwargs)


_FILE = descriptor_pb2.FileDescriptorProto(
    name="pbfway/proto/osmformat.proto",
    package="OSMPBF",
    syntax="proto2",
    message_type=[
        descriptor_pb2.DescriptorProto(
            name="StringTable",
            field=[_field("s", 1, _F.TYPE_BYTES, _F.LABEL_REPEATED)],
        ),
        descriptor_pb2.DescriptorProto(
            name="Info",
            field=[
                _field("version", 1, _F.TYPE_INT32, default_value="-1"),
                _field("timestamp", 2, _F.TYPE_INT64),
                _field("changeset", 3, _F.TYPE_INT64),
                _field("uid", 4, _F.TYPE_INT32),
                _field("user_sid", 5, _F.TYPE_UINT32),
                _field("visible", 6, _F.TYPE_BOOL),
            ],
        ),
        descriptor_pb2.DescriptorProto(
            name="Way",
            field=[
                _field("id", 1, _F.TYPE_INT64, _F.LABEL_REQUIRED),
                _field("keys", 2, _F.TYPE_UINT32, _F.LABEL_REPEATED, options=_PACKED),
                _field("vals", 3, _F.TYPE_UINT32, _F.LABEL_REPEATED, options=_PACKED),
                _field("info", 4, _F.TYPE_MESSAGE, type_name=".OSMPBF.Info"),
                _field("refs", 8, _F.TYPE_SINT64, _F.LABEL_REPEATED, options=_PACKED),
                _field("lat", 9, _F.TYPE_SINT64, _F.LABEL_REPEATED, options=_PACKED),
                _field("lon", 10, _F.TYPE_SINT64, _F.LABEL_REPEATED, options=_PACKED),
            ],
        ),
        descriptor_pb2.DescriptorProto(
            name="PrimitiveGroup",
            field=[
                _field(
                    "ways", 3, _F.TYPE_MESSAGE, _F.LABEL_REPEATED, type_name=".OSMPBF.Way"
                ),
            ],
        ),
    ],
)

_pool = descriptor_pool.DescriptorPool()
DESCRIPTOR = _pool.AddSerializedFile(_FILE.SerializeToString())

StringTable = message_factory.GetMessageClass(_pool.FindMessageTypeByName("OSMPBF.StringTable"))
Info = message_factory.GetMessageClass(_pool.FindMessageTypeByName("OSMPBF.Info"))
Way = message_factory.GetMessageClass(_pool.FindMessageTypeByName("OSMPBF.Way"))
PrimitiveGroup = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName("OSMPBF.PrimitiveGroup")
)

__all__ = ["DESCRIPTOR", "StringTable", "Info", "Way", "PrimitiveGroup"]
