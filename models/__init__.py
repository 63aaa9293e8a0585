from peewee import SqliteDatabase

from src.constants import DATABASE_NAME

db = SqliteDatabase(DATABASE_NAME)
