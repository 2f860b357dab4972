"""Protobuf schema of the persisted state file.

The messages are declared as a ``FileDescriptorProto`` and registered in a
private descriptor pool, which is equivalent to compiling::

    syntax = "proto3";
    package pomodo;

    message Done {
      enum DoneType { UNSPECIFIED = 0; WORK = 1; BREAK = 2; }
      DoneType done_type = 1;
      string start_time = 2;
      string end_time = 3;
      double duration_seconds = 4;
      string todo = 5;
    }

    message History {
      string day = 1;
      repeated Done done = 2;
    }

    message StateProto {
      repeated string todo = 1;
      History history = 2;
    }

Field numbers must never be reused; add new fields with fresh numbers.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "pomodo"

_Field = descriptor_pb2.FieldDescriptorProto


def _add_field(message, name: str, number: int, field_type: int, **kwargs) -> None:
    message.field.add(
        name=name,
        number=number,
        type=field_type,
        label=kwargs.pop("label", _Field.LABEL_OPTIONAL),
        **kwargs,
    )


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="pomodo/state.proto",
        package=PACKAGE,
        syntax="proto3",
    )

    done = file_proto.message_type.add(name="Done")
    done_type = done.enum_type.add(name="DoneType")
    done_type.value.add(name="UNSPECIFIED", number=0)
    done_type.value.add(name="WORK", number=1)
    done_type.value.add(name="BREAK", number=2)
    _add_field(
        done, "done_type", 1, _Field.TYPE_ENUM, type_name=f".{PACKAGE}.Done.DoneType"
    )
    _add_field(done, "start_time", 2, _Field.TYPE_STRING)
    _add_field(done, "end_time", 3, _Field.TYPE_STRING)
    _add_field(done, "duration_seconds", 4, _Field.TYPE_DOUBLE)
    _add_field(done, "todo", 5, _Field.TYPE_STRING)

    history = file_proto.message_type.add(name="History")
    _add_field(history, "day", 1, _Field.TYPE_STRING)
    _add_field(
        history,
        "done",
        2,
        _Field.TYPE_MESSAGE,
        type_name=f".{PACKAGE}.Done",
        label=_Field.LABEL_REPEATED,
    )

    state = file_proto.message_type.add(name="StateProto")
    _add_field(state, "todo", 1, _Field.TYPE_STRING, label=_Field.LABEL_REPEATED)
    _add_field(
        state, "history", 2, _Field.TYPE_MESSAGE, type_name=f".{PACKAGE}.History"
    )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())

Done = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.Done"))
History = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{PACKAGE}.History")
)
StateProto = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{PACKAGE}.StateProto")
)

DONE_TYPE_UNSPECIFIED = 0
DONE_TYPE_WORK = 1
DONE_TYPE_BREAK = 2
