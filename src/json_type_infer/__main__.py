from json_type_infer.cli import main

main()
