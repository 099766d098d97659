from dataclasses import dataclass


@dataclass
class MongoDBConfig:
    uri: str = "mongodb://localhost:27017/keeplynk_ai"
    database: str = "keeplynk_ai"
    memory_collection: str = "agent_memory"
