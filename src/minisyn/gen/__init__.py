# THIS FILE IS AUTOMATICALLY GENERATED; DO NOT EDIT
