from .vehicle_mapper import VEHICLE_FIELDS, parse_id, to_dto, to_entity
